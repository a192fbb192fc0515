import io

import pytest

from upper_table.generator import generate

from fake_oracle import run_script


@pytest.fixture(scope="session")
def script():
    out = io.StringIO()
    generate(out, year=2024)
    return out.getvalue()


@pytest.fixture(scope="session")
def generated_module(script):
    """The OracleUpperTable module as Oracle would print it, imported."""
    source = run_script(script)
    namespace = {"__name__": "oracle_upper_table"}
    exec(compile(source, "oracle_upper_table.py", "exec"), namespace)
    return namespace
