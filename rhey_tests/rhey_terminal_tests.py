import os
import subprocess
import sys
import tomllib

import numpy as np
import pandas as pd

import suite
from dgen import from_schema
from rhey import R, empty, configure, get_settings, reset, Settings
from rhey import config

test = suite.test
assert_that = suite.assert_that

product_schema = {
    'sku': 'ean8',
    'price': ('pyfloat', {'min_value': 1, 'max_value': 100, 'right_digits': 2}),
    'category': {'_provider': 'choice', 'from': ['books', 'games']},
}


# --- conversions ---

@test("to_list returns an independent plain list")
def test_to_list():
    c = R([1, 2, 3])
    data = c.to_list()
    assert_that(type(data) is list and data == [1, 2, 3], "should be a plain list")
    data.append(4)
    assert_that(len(c) == 3, "mutating the list should not touch the container")


@test("to_array converts to numpy")
def test_to_array():
    arr = R([1, 2, 3]).to_array()
    assert_that(isinstance(arr, np.ndarray), "should be an ndarray")
    assert_that(arr.sum() == 6, "values should carry over")


@test("to_series and to_df convert to pandas")
def test_to_pandas():
    series = R([1.5, 2.5]).to_series()
    assert_that(isinstance(series, pd.Series) and series.sum() == 4.0, "should be a pandas series")
    products = from_schema(product_schema, seed=21).take(8)
    df = products.to_df()
    assert_that(isinstance(df, pd.DataFrame), "should be a dataframe")
    assert_that(df.shape == (8, 3), "one row per record, one column per field")
    assert_that(list(df.columns) == ['sku', 'price', 'category'], "columns should follow the record keys")
    assert_that(empty().to_df().empty, "empty container should give an empty dataframe")


# --- settings ---

@test("configure replaces settings and reset restores defaults")
def test_configure():
    try:
        updated = configure(vectorize=False)
        assert_that(isinstance(updated, Settings), "configure should return settings")
        assert_that(get_settings().vectorize is False, "vectorize should be off")
        assert_that(get_settings().seed is None, "untouched settings should keep their values")
    finally:
        reset()
    assert_that(get_settings() == Settings(), "reset should restore the defaults")


@test("filter gives the same result with and without vectorisation")
def test_vectorize_equivalence():
    ints = R(list(range(-20, 20)))
    predicate = lambda x: x % 3 == 0 or x > 15
    try:
        configure(vectorize=True)
        fast = ints.filter(predicate)
        configure(vectorize=False)
        slow = ints.filter(predicate)
    finally:
        reset()
    assert_that(fast == slow, "both paths should keep the same elements")
    assert_that(all(type(x) is int for x in fast), "vectorised results should stay python ints")


@test("random_index stays within bounds")
def test_random_index():
    draws = [config.random_index(3) for _ in range(200)]
    assert_that(set(draws) <= {0, 1, 2}, "draws should be in [0, 3)")
    assert_that(all(type(d) is int for d in draws), "draws should be python ints")


@test("RHEY_SEED seeds the random source at import")
def test_seed_env():
    script = "import rhey; print(rhey.R(range(20)).shuffle().to_list())"
    env = dict(os.environ, RHEY_SEED="99")
    runs = [subprocess.run([sys.executable, "-c", script], env=env, capture_output=True, text=True,
                           cwd=os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
            for _ in range(2)]
    assert_that(all(r.returncode == 0 for r in runs), f"subprocess failed: {runs[0].stderr}")
    assert_that(runs[0].stdout == runs[1].stdout, "the same seed should give the same shuffle")


# --- packaging ---

@test("only the rhey packages are installed")
def test_packaging_layout():
    root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    with open(os.path.join(root, "pyproject.toml"), "rb") as f:
        project = tomllib.load(f)
    setuptools_table = project["tool"]["setuptools"]
    assert_that(setuptools_table["packages"] == ["rhey", "rhey.extensions"], "only the library should be packaged")
    assert_that("py-modules" not in setuptools_table, "the test runner and fixtures should stay out of the install")
    assert_that("faker" not in " ".join(project["project"]["dependencies"]), "faker should only be a test dependency")


if __name__ == "__main__":
    suite.run(title="rhey conversions and settings test suite")
