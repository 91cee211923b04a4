"""Persistence of domains."""

from .domain_store import DomainRecord, DomainStore, domain_from_record, record_from_domain

__all__ = ["DomainRecord", "DomainStore", "domain_from_record", "record_from_domain"]
