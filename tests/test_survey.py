import json
import signal

import pytest

from survey.config import JOB_QUEUE
from survey.run_survey import build_job, certify, SurveyRunner
from jordan_reduction import ReductionConfig


@pytest.mark.parametrize("name, expected", [
    ("S(5)", {"certified_preprimitive_degree": 4, "true_preprimitive_degree": 5}),
    ("A(5)", {"certified_preprimitive_degree": 3, "true_preprimitive_degree": 3}),
    ("AGL(1,5)", {"certified_preprimitive_degree": 1, "true_preprimitive_degree": 1}),
    ("PGL(2,5)", {"certified_preprimitive_degree": 2, "true_preprimitive_degree": 2}),
])
def test_certify(name, expected):
    (_, builder, n), = [job for job in JOB_QUEUE if job[0] == name]
    record = certify(build_job(builder, n), ReductionConfig(verify_steps=True))
    for key, value in expected.items():
        assert record[key] == value
    json.dumps(record)


def test_certify_containment():
    record = certify(build_job("symmetric", 4))
    assert record["swap"] == {"claim": "symmetric", "verified": True}
    assert record["three_cycle"] == {"claim": "alternating", "verified": True}
    assert record["two_pretransitive"]["degree"] == 2


def test_imprimitive_group_is_only_described():
    record = certify(build_job("dihedral", 6))
    assert record["preprimitive"] is False
    assert "certified_preprimitive_degree" not in record


def test_unknown_builder():
    with pytest.raises(ValueError):
        build_job("sporadic", 11)


@pytest.fixture
def restore_sigint():
    previous = signal.getsignal(signal.SIGINT)
    yield
    signal.signal(signal.SIGINT, previous)


def test_runner_writes_results(tmp_path, restore_sigint):
    runner = SurveyRunner(ReductionConfig(), results_dir=str(tmp_path))
    assert signal.getsignal(signal.SIGINT) == runner._handle_signal
    records = runner.run(only="A(4)")
    assert len(records) == 1
    with open(tmp_path / "A_4.json") as f:
        assert json.load(f)["group"] == "A(4)"
