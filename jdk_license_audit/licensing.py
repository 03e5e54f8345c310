"""
Oracle commercial license decision table.

Each historical policy regime is one ``LicenseRule``. Rules are evaluated in
order and the first whose predicate matches produces the decision. Version
dependent rules receive the parsed major version through ``RuleInput``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Tuple

from .errors import VersionParseError
from .models import LicenseDecision, RawRuntimeRecord
from .time_utils import parse_build_date
from .versions import extract_minor_segment, extract_update_number, parse_major


logger = logging.getLogger(__name__)

JAVA8_PAID_UPDATE = 211
JAVA8_CUTOFF = date(2019, 4, 16)
JAVA17_PAID_PATCH = 13
JAVA17_CUTOFF = date(2024, 10, 1)
NFTC_CUTOFF = date(2026, 10, 1)


@dataclass(frozen=True)
class RuleInput:
    """Normalized view of a raw record used by the rules."""

    vendor: str
    vendor_version: str
    version: str
    build_date: str
    major: Optional[int]

    @classmethod
    def from_record(cls, record: RawRuntimeRecord) -> "RuleInput":
        version = (record.get("version") or "").strip()
        try:
            major: Optional[int] = parse_major(version)
        except VersionParseError:
            major = None
        return cls(
            vendor=(record.get("vendor") or "").strip(),
            vendor_version=(record.get("vendorVersion") or "").strip(),
            version=version,
            build_date=(record.get("buildDate") or "").strip(),
            major=major,
        )


@dataclass(frozen=True)
class LicenseRule:
    """One row of the decision table."""

    name: str
    applies: Callable[[RuleInput], bool]
    decide: Callable[[RuleInput], LicenseDecision]


def _free(explanation: str) -> LicenseDecision:
    return LicenseDecision(requires_license=False, explanation=explanation)


def _paid(explanation: str) -> LicenseDecision:
    return LicenseDecision(requires_license=True, explanation=explanation)


def _major_in(low: int, high: Optional[int] = None) -> Callable[[RuleInput], bool]:
    def predicate(rule_input: RuleInput) -> bool:
        if rule_input.major is None:
            return False
        if high is None:
            return rule_input.major >= low
        return low <= rule_input.major <= high
    return predicate


def _by_build_date(
    label: str, build_date: str, cutoff: date, free_terms: str = "free"
) -> Optional[LicenseDecision]:
    parsed = parse_build_date(build_date)
    if parsed is None:
        if build_date:
            logger.debug("Ignoring malformed build date %r for %s", build_date, label)
        return None
    if parsed < cutoff:
        return _free(
            f"{label} build {parsed.isoformat()} is {free_terms} (< {cutoff.isoformat()})"
        )
    return _paid(
        f"{label} build {parsed.isoformat()} requires license (>= {cutoff.isoformat()})"
    )


def _is_non_oracle(rule_input: RuleInput) -> bool:
    vendor = rule_input.vendor.lower()
    return "oracle" not in vendor and "sun" not in vendor


def _decide_non_oracle(rule_input: RuleInput) -> LicenseDecision:
    vendor = rule_input.vendor or "unknown"
    return _free(f"Not an Oracle/Sun distribution. Vendor: {vendor}")


def _is_oracle_openjdk(rule_input: RuleInput) -> bool:
    return "openjdk" in rule_input.vendor_version.lower()


def _decide_oracle_openjdk(rule_input: RuleInput) -> LicenseDecision:
    return _free("Oracle OpenJDK is free (GPLv2+CPE) but lacks long-term support")


def _is_unparseable(rule_input: RuleInput) -> bool:
    return rule_input.major is None


def _decide_unparseable(rule_input: RuleInput) -> LicenseDecision:
    shown = rule_input.version or "missing"
    return _free(f"Java version '{shown}' unavailable, defaulting to free")


def _decide_end_of_life(rule_input: RuleInput) -> LicenseDecision:
    return _free(f"Java {rule_input.major} is end-of-life and free")


def _decide_java8(rule_input: RuleInput) -> LicenseDecision:
    update = extract_update_number(rule_input.version)
    if update is not None:
        if update >= JAVA8_PAID_UPDATE:
            return _paid(f"Java 8 Update {update} requires license (released >= April 2019)")
        return _free(f"Java 8 Update {update} is free (< April 2019)")

    decision = _by_build_date("Java 8", rule_input.build_date, JAVA8_CUTOFF)
    if decision is not None:
        return decision
    return _free("Java 8 free (update/date unavailable, defaulting to free)")


def _decide_non_lts_paid(rule_input: RuleInput) -> LicenseDecision:
    return _paid(
        f"Java {rule_input.major} requires commercial license (non-LTS, end-of-life)"
    )


def _decide_java11(rule_input: RuleInput) -> LicenseDecision:
    return _paid("Java 11 always requires a commercial license")


def _decide_java17(rule_input: RuleInput) -> LicenseDecision:
    patch = extract_minor_segment(rule_input.version)
    if patch is not None:
        if patch >= JAVA17_PAID_PATCH:
            return _paid(f"Java 17.0.{patch} requires license (>= October 2024)")
        return _free(f"Java 17.0.{patch} is free (<= 17.0.{JAVA17_PAID_PATCH - 1})")

    decision = _by_build_date("Java 17", rule_input.build_date, JAVA17_CUTOFF)
    if decision is not None:
        return decision
    return _free("Java 17 free (update/date unavailable, defaulting to free)")


def _decide_nftc_non_lts(rule_input: RuleInput) -> LicenseDecision:
    return _free(f"Java {rule_input.major} is free under NFTC (non-LTS)")


def _decide_nftc(rule_input: RuleInput) -> LicenseDecision:
    decision = _by_build_date(
        "Java 21+", rule_input.build_date, NFTC_CUTOFF, free_terms="free under NFTC"
    )
    if decision is not None:
        return decision
    return _free(
        f"Java 21+ is free under NFTC until {NFTC_CUTOFF.isoformat()} "
        "(build date unavailable, defaulting to free)"
    )


LICENSE_RULES: Tuple[LicenseRule, ...] = (
    LicenseRule("non-oracle-vendor", _is_non_oracle, _decide_non_oracle),
    LicenseRule("oracle-openjdk", _is_oracle_openjdk, _decide_oracle_openjdk),
    LicenseRule("unparseable-version", _is_unparseable, _decide_unparseable),
    LicenseRule("end-of-life", _major_in(0, 7), _decide_end_of_life),
    LicenseRule("java-8", _major_in(8, 8), _decide_java8),
    LicenseRule("java-9-10", _major_in(9, 10), _decide_non_lts_paid),
    LicenseRule("java-11", _major_in(11, 11), _decide_java11),
    LicenseRule("java-12-16", _major_in(12, 16), _decide_non_lts_paid),
    LicenseRule("java-17", _major_in(17, 17), _decide_java17),
    LicenseRule("java-18-20", _major_in(18, 20), _decide_nftc_non_lts),
    LicenseRule("java-21-plus", _major_in(21), _decide_nftc),
)


def find_rule(record: RawRuntimeRecord) -> LicenseRule:
    """Return the first rule of the table matching ``record``."""
    return _match(RuleInput.from_record(record))


def classify_license(record: RawRuntimeRecord) -> LicenseDecision:
    """Decide whether a runtime requires an Oracle commercial license."""
    rule_input = RuleInput.from_record(record)
    rule = _match(rule_input)
    decision = rule.decide(rule_input)
    logger.debug("Rule %s matched %s: %s", rule.name, rule_input.version, decision)
    return decision


def _match(rule_input: RuleInput) -> LicenseRule:
    for rule in LICENSE_RULES:
        if rule.applies(rule_input):
            return rule
    # Every integer major version is covered by the table.
    raise AssertionError(f"No license rule matched {rule_input!r}")
