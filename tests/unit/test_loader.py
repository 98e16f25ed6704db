"""Tests for the configuration loader."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from dnsctl.core import ir
from dnsctl.core.errors import ConfigurationError, EvaluationError, LoadError, PostProcessError
from dnsctl.core.loader import load_dns_config


def test_empty_source_fails_before_evaluation():
    evaluator = MagicMock()
    with pytest.raises(ConfigurationError, match="no config specified"):
        load_dns_config("", evaluator=evaluator)
    evaluator.assert_not_called()


def test_evaluator_receives_source_dev_mode_and_variables():
    evaluator = MagicMock(return_value=ir.DNSConfig())
    post_processor = MagicMock()

    config = load_dns_config(
        "dnsconfig.toml",
        True,
        ["IP=192.0.2.1", "junk", "IP=192.0.2.2"],
        evaluator=evaluator,
        post_processor=post_processor,
    )

    evaluator.assert_called_once_with("dnsconfig.toml", True, {"IP": "192.0.2.2"})
    post_processor.assert_called_once_with(config.domains)


def test_evaluator_failure_is_wrapped_with_source():
    cause = EvaluationError("WEB_IP is not defined")
    evaluator = MagicMock(side_effect=cause)
    post_processor = MagicMock()

    with pytest.raises(LoadError) as excinfo:
        load_dns_config("zones.toml", evaluator=evaluator, post_processor=post_processor)

    assert str(excinfo.value) == "executing zones.toml: WEB_IP is not defined"
    assert excinfo.value.__cause__ is cause
    post_processor.assert_not_called()


def test_post_process_failure_propagates_unwrapped():
    error = PostProcessError("example.com: MX record '@': expected 2 args, got 1")
    evaluator = MagicMock(return_value=ir.DNSConfig())
    post_processor = MagicMock(side_effect=error)

    with pytest.raises(PostProcessError) as excinfo:
        load_dns_config("zones.toml", evaluator=evaluator, post_processor=post_processor)

    assert excinfo.value is error


def test_default_collaborators_load_real_source(example_source: Path):
    config = load_dns_config(str(example_source), variables=["WEB_IP=192.0.2.10"])

    records = config.domains[0].records
    assert records[0].target == "192.0.2.10"
    assert records[2].mxpreference == 10
    assert records[2].target == "mail.example.com."
    assert records[2].args is None


def test_missing_source_file_is_load_error(tmp_path: Path):
    with pytest.raises(LoadError, match="executing .*nope.toml"):
        load_dns_config(str(tmp_path / "nope.toml"))


def test_ir_file_skips_evaluator_and_post_processor(tmp_path: Path):
    ir_path = tmp_path / "ir.json"
    ir_path.write_text(
        '{"registrars":[],"dns_providers":[],"domains":'
        '[{"name":"example.com","dnsProviders":{"bind":-1},"records":'
        '[{"type":"MX","name":"@","target":"mail.example.com.","mxpreference":10}]}]}'
    )
    evaluator = MagicMock()
    post_processor = MagicMock()

    config = load_dns_config(
        "", ir_file=str(ir_path), evaluator=evaluator, post_processor=post_processor
    )

    evaluator.assert_not_called()
    post_processor.assert_not_called()
    domain = config.domains[0]
    assert domain.dns_providers == {"bind": -1}
    assert domain.records[0].mxpreference == 10


def test_missing_ir_file_is_load_error(tmp_path: Path):
    with pytest.raises(LoadError, match="reading .*ir.json"):
        load_dns_config("dnsconfig.toml", ir_file=str(tmp_path / "ir.json"))
