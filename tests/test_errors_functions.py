import unittest

from fluentopt.errors import AbsenceError, NullValueError, NoSuchElementError, ContractError
from fluentopt.functions import require_callable


class TestErrorTaxonomy(unittest.TestCase):
    def test_absence_kinds(self):
        self.assertTrue(issubclass(NullValueError, AbsenceError))
        self.assertTrue(issubclass(NullValueError, ValueError))
        self.assertTrue(issubclass(NoSuchElementError, AbsenceError))
        self.assertTrue(issubclass(NoSuchElementError, LookupError))

    def test_contract_kind_is_distinct(self):
        self.assertTrue(issubclass(ContractError, TypeError))
        self.assertFalse(issubclass(ContractError, AbsenceError))


class TestRequireCallable(unittest.TestCase):
    def test_accepts_callables(self):
        class Call:
            def __call__(self): return 1

        for f in (len, lambda: None, Call(), int):
            require_callable(f, "unused")

    def test_rejects_non_callables(self):
        for f in (None, 3, "f", [len]):
            with self.assertRaises(ContractError) as cm:
                require_callable(f, "The given mapper is not a function")
            self.assertEqual(str(cm.exception), "The given mapper is not a function")
