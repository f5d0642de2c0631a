import math

import pytest

from shape_sampler.exceptions import DomainError, InternalError
from shape_sampler.transforms.draws import (
    MAX_DOMAIN_RETRIES,
    bernoulli_gate,
    check_uniform,
    draw_with_retry,
    ensure_finite,
)
from shape_sampler.transforms.logistic import logit


@pytest.mark.parametrize("u", [-0.1, 1.0, math.nan, math.inf])
def test_check_uniform_rejects_out_of_contract_draws(u):
    with pytest.raises(DomainError):
        check_uniform(u)


def test_ensure_finite_rejects_overflow():
    with pytest.raises(DomainError):
        ensure_finite(math.inf)
    assert ensure_finite(1.5) == 1.5


def test_draw_with_retry_redraws_after_domain_error(scripted):
    source = scripted([0.0, 0.0, 0.5])
    assert draw_with_retry(source, logit, label="shape") == 0.0
    assert source.calls == 3


def test_draw_with_retry_escalates_after_cap(constant, caplog):
    source = constant(0.0)
    with pytest.raises(InternalError) as excinfo:
        draw_with_retry(source, logit, label="shape")
    assert source.calls == MAX_DOMAIN_RETRIES
    assert isinstance(excinfo.value.__cause__, DomainError)
    assert any("exhausted" in r.message for r in caplog.records)


def test_bernoulli_gate_consumes_exactly_one_draw(scripted):
    source = scripted([0.05, 0.95])
    assert bernoulli_gate(source, 0.1) is True
    assert bernoulli_gate(source, 0.1) is False
    assert source.calls == 2
