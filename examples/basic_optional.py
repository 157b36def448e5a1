"""
Basic Optional usage: construction, chaining, fallbacks and logging a chain.

Run: python examples/basic_optional.py
"""
from fluentopt import ConsoleLogger, Optional, NoSuchElementError


def find_user(users, name):
    return Optional.of_nullable(users.get(name))


def main():
    log = ConsoleLogger(level="DEBUG")
    users = {"ada": {"profile_url": None}, "bob": {"profile_url": "/bob.jpeg"}}

    # Fallback instead of an if/else on None
    for name in ("ada", "bob", "eve"):
        url = (
            find_user(users, name)
            .peek(log.tap("lookup", level="DEBUG"))
            .map(lambda u: u["profile_url"])
            .or_else("/default-profile.jpeg")
        )
        log.info("profile", user=name, url=url)

    # flat_map chains lookups that may each be absent
    first_letter = find_user(users, "bob").flat_map(lambda u: Optional.of_nullable(u["profile_url"])).map(lambda s: s[1])
    first_letter.if_present_or_else(
        lambda c: log.info("first letter", letter=c),
        lambda: log.warn("no profile url"),
    )

    # Required values raise at the call site
    try:
        find_user(users, "eve").get()
    except NoSuchElementError as e:
        log.error("missing user", error=str(e))


if __name__ == "__main__":
    main()
