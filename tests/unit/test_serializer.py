"""Tests for IR serialization."""

import io
import json
import os
from pathlib import Path

import pytest

from dnsctl.core import ir
from dnsctl.core.errors import SerializationError
from dnsctl.core.serializer import DISCARD, PrintJSONArgs, print_json, render_json


def _strip_whitespace(text: str) -> str:
    return "".join(text.split())


def test_pretty_and_compact_differ_only_in_whitespace(simple_config: ir.DNSConfig):
    pretty = render_json(simple_config, pretty=True)
    compact = render_json(simple_config, pretty=False)

    assert pretty != compact
    assert _strip_whitespace(pretty) == _strip_whitespace(compact)
    assert json.loads(pretty) == json.loads(compact)


def test_pretty_uses_two_space_indent(simple_config: ir.DNSConfig):
    lines = render_json(simple_config, pretty=True).splitlines()
    assert lines[0] == "{"
    assert lines[1].startswith('  "registrars"')


def test_compact_has_no_layout_whitespace():
    compact = render_json(ir.DNSConfig())
    assert compact == '{"registrars":[],"dns_providers":[],"domains":[]}'


def test_output_uses_aliases_and_omits_unset_fields(simple_config: ir.DNSConfig):
    data = json.loads(render_json(simple_config))
    domain = data["domains"][0]

    assert domain["dnsProviders"] == {"bind": -1}
    assert "dns_providers" not in domain
    a_record = domain["records"][0]
    assert "mxpreference" not in a_record
    assert "args" not in a_record
    assert domain["records"][2]["mxpreference"] == 10


def test_stream_output_ends_with_newline(simple_config: ir.DNSConfig):
    stream = io.StringIO()
    print_json(PrintJSONArgs(), simple_config, stream)

    assert stream.getvalue().endswith("}\n")
    assert json.loads(stream.getvalue()) == json.loads(render_json(simple_config))


def test_file_output_truncates_and_has_no_newline(simple_config: ir.DNSConfig, tmp_path: Path):
    target = tmp_path / "ir.json"
    target.write_text("x" * 10_000)
    stream = io.StringIO()

    print_json(PrintJSONArgs(pretty=True, output=str(target)), simple_config, stream)

    written = target.read_text()
    assert written == render_json(simple_config, pretty=True)
    assert not written.endswith("\n")
    assert stream.getvalue() == ""


def test_discard_output_succeeds(simple_config: ir.DNSConfig):
    stream = io.StringIO()
    print_json(PrintJSONArgs(output=DISCARD), simple_config, stream)
    assert DISCARD == os.devnull
    assert stream.getvalue() == ""


def test_unwritable_output_raises(simple_config: ir.DNSConfig, tmp_path: Path):
    target = tmp_path / "missing-dir" / "ir.json"
    with pytest.raises(SerializationError, match="missing-dir"):
        print_json(PrintJSONArgs(output=str(target)), simple_config, io.StringIO())
