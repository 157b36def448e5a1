from __future__ import annotations
import sys, datetime as _dt, json
from typing import Any, Callable, Dict, IO


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class ConsoleLogger:
    def __init__(self, name: str = "fluentopt", level: str = "INFO", json_output: bool = False,
                 context: Dict[str, Any] | None = None, stream: IO[str] | None = None):
        self.name = name
        self.level = _LEVELS.get(level.upper(), 20)
        self.json_output = json_output
        self.context = dict(context or {})
        self.stream = stream

    def set_level(self, level: str) -> None:
        self.level = _LEVELS.get(level.upper(), self.level)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        ctx = dict(self.context); ctx.update(fields)
        return ConsoleLogger(self.name, level=self.level_name, json_output=self.json_output, context=ctx, stream=self.stream)

    @property
    def level_name(self) -> str:
        for k, v in _LEVELS.items():
            if v == self.level: return k
        return "INFO"

    def _log(self, level: str, msg: str, **fields: Any) -> None:
        if _LEVELS[level] < self.level:
            return
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        out = self.stream if self.stream is not None else sys.stderr
        all_fields: Dict[str, Any] = {}
        all_fields.update(self.context)
        all_fields.update(fields)
        if self.json_output:
            data: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
            if all_fields:
                data["fields"] = all_fields
            print(json.dumps(data, separators=(",", ":"), default=repr), file=out)
        else:
            extras = "".join([f" {k}={v}" for k, v in sorted(all_fields.items())]) if all_fields else ""
            print(f"[{ts}] {self.name} {level}: {msg}{extras}", file=out)

    def debug(self, msg: str, **fields: Any) -> None: self._log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self._log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self._log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self._log("ERROR", msg, **fields)

    def tap(self, msg: str, level: str = "DEBUG") -> Callable[[Any], None]:
        """Consumer for ``Optional.peek`` that logs the peeked value under ``value``."""
        lvl = level.upper()
        if lvl not in _LEVELS:
            raise ValueError(f"unknown log level: {level}")
        def consume(value: Any) -> None:
            self._log(lvl, msg, value=value)
        return consume
