"""
tiny test runner used by rhey_tests/.

register cases with @test("description"), check with assert_that / assert_raises,
and call run(title) under __main__. the registered functions stay plain
functions, so pytest can collect the same modules.
"""
import sys
import time
import traceback
from functools import wraps
from typing import Any, Callable, Dict, List, Type

_registry: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}


class _c:
    """ansi colour codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """raised by assert_that so failures are told apart from crashes."""
    __test__ = False


# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _registry['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


# the decorator itself is not a test case
test.__test__ = False


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(exc_type: Type[BaseException], func: Callable[[], Any], message: str = "") -> BaseException:
    """call func and require it to raise exc_type; returns the caught exception."""
    try:
        func()
    except exc_type as e:
        return e
    raise SuiteAssertionError(message or f"expected {exc_type.__name__} to be raised")


def run(title: str = "test run", verbose_errors: bool = False) -> bool:
    """run every registered case, print a report and return True when all passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()

    results = []
    for case in _registry['tests']:
        error = None
        try:
            case['func']()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose_errors:
                traceback.print_exc()

        results.append({'passed': error is None, 'description': case['description'], 'error': error})
        if error is None:
            print(f"  {_c.ok}pass{_c.reset}  {case['description']}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {case['description']}")
            print(f"    {_c.grey}-> {error}{_c.reset}")

    _registry['results'] = results
    # cleared so several suites can run from one script
    _registry['tests'] = []
    return _print_summary(results, start_time)


def _print_summary(results: List[Dict[str, Any]], start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    failed = sum(1 for r in results if not r['passed'])
    colour = _c.ok if failed == 0 else _c.fail

    print(f"\n{colour}ran {len(results)} tests in {duration:.2f}ms: "
          f"{len(results) - failed} passed, {failed} failed{_c.reset}\n")
    return failed == 0


if __name__ == "__main__":
    # python suite.py rhey_tests/rhey_container_tests.py ...
    import runpy
    # test modules register into the importable `suite`, not this __main__ copy
    import suite
    ok = True
    for path in sys.argv[1:]:
        runpy.run_path(path, run_name="suite_collect")
        ok = suite.run(title=path) and ok
    sys.exit(0 if ok else 1)
