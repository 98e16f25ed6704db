"""
Configuration object graph for dnsctl IR.

This module contains the DNSConfig root and the registrar, provider,
domain, and record types it is built from. Field aliases are the names
used in the serialized IR.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RegistrarConfig(BaseModel):
    """
    A registrar declared by the configuration source.

    Attributes:
        name: Name domains use to refer to this registrar
        type: Registrar implementation (e.g. "NONE", "GANDI_V5")
        meta: Free-form provider settings
    """

    name: str
    type: str
    meta: dict[str, str] = Field(default_factory=dict)


class DNSProviderConfig(BaseModel):
    """
    A DNS provider declared by the configuration source.

    Attributes:
        name: Name domains use to refer to this provider
        type: Provider implementation (e.g. "BIND", "CLOUDFLAREAPI")
        meta: Free-form provider settings
    """

    name: str
    type: str
    meta: dict[str, str] = Field(default_factory=dict)


class RecordConfig(BaseModel):
    """
    A single DNS record within a domain.

    ``args`` holds the raw positional arguments from the source until
    post-processing expands them into the typed fields below; it is never
    part of the serialized IR.
    """

    type: str
    name: str = "@"
    target: str = ""
    ttl: int | None = None
    meta: dict[str, str] = Field(default_factory=dict)

    mxpreference: int | None = None
    srvpriority: int | None = None
    srvweight: int | None = None
    srvport: int | None = None
    caaflag: int | None = None
    caatag: str | None = None

    args: list[Any] | None = Field(default=None, exclude=True)

    model_config = ConfigDict(populate_by_name=True)

    def identity(self) -> tuple[Any, ...]:
        """Key used to detect exact duplicates within a domain."""
        return (
            self.type,
            self.name,
            self.target,
            self.mxpreference,
            self.srvpriority,
            self.srvweight,
            self.srvport,
            self.caaflag,
            self.caatag,
        )


class DomainConfig(BaseModel):
    """
    A domain (zone) and the records it holds.

    Attributes:
        name: Zone name, e.g. "example.com"
        registrar: Name of a declared registrar
        dns_providers: Provider name to number of nameservers to use (-1 for all)
        meta: Free-form domain settings
        records: Records in source order
        nameservers: Explicit nameserver host names
    """

    name: str
    registrar: str = ""
    dns_providers: dict[str, int] = Field(default_factory=dict, alias="dnsProviders")
    meta: dict[str, str] = Field(default_factory=dict)
    records: list[RecordConfig] = Field(default_factory=list)
    nameservers: list[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class DNSConfig(BaseModel):
    """
    Root of the configuration object graph.

    Produced by the evaluator, mutated only by the normalizer, and
    serialized as the IR.
    """

    registrars: list[RegistrarConfig] = Field(default_factory=list)
    dns_providers: list[DNSProviderConfig] = Field(default_factory=list)
    domains: list[DomainConfig] = Field(default_factory=list)

    def find_registrar(self, name: str) -> RegistrarConfig | None:
        for registrar in self.registrars:
            if registrar.name == name:
                return registrar
        return None

    def find_dns_provider(self, name: str) -> DNSProviderConfig | None:
        for provider in self.dns_providers:
            if provider.name == name:
                return provider
        return None
