import pytest

from collectors.sources import CommandResult

CPUINFO_TEXT = """processor\t: 0
vendor_id\t: GenuineIntel
cpu family\t: 6
model\t\t: 85
model name\t: Intel(R) Xeon(R) Platinum 8259CL CPU @ 2.50GHz
stepping\t: 7
flags\t\t: fpu vme de pse

processor\t: 1
vendor_id\t: GenuineIntel
model\t\t: 85
model name\t: Intel(R) Xeon(R) Platinum 8259CL CPU @ 2.50GHz
"""

STAT_TEXT = """cpu 100 20 30 500 10 5 2 1
cpu0 50 10 15 250 5 2 1 0
intr 12345 0 0
ctxt 987654
btime 1600000000
processes 4242
procs_running 1
"""

LAMBDA_ENV_TEXT = """PATH=/var/lang/bin:/usr/local/bin:/usr/bin/:/bin
AWS_LAMBDA_FUNCTION_NAME=foo
AWS_LAMBDA_FUNCTION_MEMORY_SIZE=512
AWS_REGION=us-west-2
AWS_LAMBDA_LOG_STREAM_NAME=2026/10/19/[$LATEST]abc123
LANG=en_US.UTF-8
"""


class FakeRunner:
    """Stands in for run_command; maps argv tuples to canned results."""

    def __init__(self, results=None, default=None):
        self.results = {tuple(k): v for k, v in (results or {}).items()}
        self.default = default or CommandResult(ok=False, error="ERROR", returncode=1)
        self.calls = []

    def __call__(self, cmd):
        self.calls.append(list(cmd))
        return self.results.get(tuple(cmd), self.default)


@pytest.fixture
def proc_dir(tmp_path):
    d = tmp_path / "proc"
    d.mkdir()
    (d / "cpuinfo").write_text(CPUINFO_TEXT)
    (d / "stat").write_text(STAT_TEXT)
    return d


@pytest.fixture
def marker_file(tmp_path):
    return tmp_path / "container-id"


@pytest.fixture
def lambda_runner():
    return FakeRunner({
        ("env",): CommandResult(ok=True, stdout=LAMBDA_ENV_TEXT, returncode=0),
        ("uname", "-v"): CommandResult(ok=True, stdout="#1 SMP Wed Oct 1 12:00:00 UTC 2026\n", returncode=0),
    })


@pytest.fixture
def make_runner():
    return FakeRunner


@pytest.fixture
def cpuinfo_text():
    return CPUINFO_TEXT


@pytest.fixture
def stat_text():
    return STAT_TEXT


@pytest.fixture
def lambda_env_text():
    return LAMBDA_ENV_TEXT
