"""Shared pytest fixtures for dnsctl tests."""

import logging
from pathlib import Path

import pytest

from dnsctl.core import ir, rfc4183

EXAMPLE_TOML = """
[registrars.none]
type = "NONE"

[dns_providers.bind]
type = "BIND"
directory = "zones"

[[domains]]
name = "Example.COM."
registrar = "none"
dns_providers = { bind = -1 }
records = [
    { type = "A", name = "@", target = "${WEB_IP}" },
    { type = "cname", name = "www", target = "@", ttl = 3600 },
    { type = "MX", name = "@", args = [10, "mail.example.com."] },
]
"""


@pytest.fixture(autouse=True)
def _reset_reverse_zone_notices():
    """Reverse zone notices are process-wide; start each test clean."""
    rfc4183.reset()
    yield
    rfc4183.reset()


@pytest.fixture(autouse=True)
def _restore_dnsctl_logger():
    """CLI runs attach a handler bound to the runner's streams; drop it afterwards."""
    logger = logging.getLogger("dnsctl")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def example_source(tmp_path: Path) -> Path:
    """Write a small but complete TOML configuration source."""
    source = tmp_path / "dnsconfig.toml"
    source.write_text(EXAMPLE_TOML)
    return source


@pytest.fixture
def empty_source(tmp_path: Path) -> Path:
    """Write a source that declares nothing."""
    source = tmp_path / "dnsconfig.toml"
    source.write_text("")
    return source


@pytest.fixture
def simple_config() -> ir.DNSConfig:
    """Return an already-evaluated configuration."""
    return ir.DNSConfig(
        registrars=[ir.RegistrarConfig(name="none", type="NONE")],
        dns_providers=[ir.DNSProviderConfig(name="bind", type="BIND")],
        domains=[
            ir.DomainConfig(
                name="example.com",
                registrar="none",
                dns_providers={"bind": -1},
                records=[
                    ir.RecordConfig(type="A", name="@", target="192.0.2.1", ttl=300),
                    ir.RecordConfig(
                        type="TXT", name="@", target="v=spf1 include:_spf.example.net -all", ttl=300
                    ),
                    ir.RecordConfig(
                        type="MX", name="@", target="mail.example.com.", ttl=300, mxpreference=10
                    ),
                ],
            )
        ],
    )
