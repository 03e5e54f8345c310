"""Tests for the Oracle license decision table."""

import pytest

from jdk_license_audit.licensing import (
    LICENSE_RULES,
    classify_license,
    find_rule,
)


ORACLE = "Oracle Corporation"


def oracle(version, **extra):
    record = {"version": version, "vendor": ORACLE}
    record.update(extra)
    return record


def test_rule_table_order():
    assert [rule.name for rule in LICENSE_RULES] == [
        "non-oracle-vendor",
        "oracle-openjdk",
        "unparseable-version",
        "end-of-life",
        "java-8",
        "java-9-10",
        "java-11",
        "java-12-16",
        "java-17",
        "java-18-20",
        "java-21-plus",
    ]


@pytest.mark.parametrize("vendor", ["Eclipse Adoptium", "Amazon.com Inc.", "", None])
def test_non_oracle_vendor_is_free(vendor):
    decision = classify_license({"version": "11.0.3", "vendor": vendor})
    assert decision.requires_license is False
    assert "Not an Oracle/Sun distribution" in decision.explanation
    assert find_rule({"version": "11.0.3", "vendor": vendor}).name == "non-oracle-vendor"


def test_non_oracle_explanation_names_vendor():
    decision = classify_license({"version": "17.0.2", "vendor": "Eclipse Adoptium"})
    assert "Eclipse Adoptium" in decision.explanation


def test_vendor_match_is_case_insensitive():
    assert classify_license({"version": "11.0.1", "vendor": "ORACLE CORPORATION"}).requires_license
    sun = {"version": "1.6.0_45", "vendor": "Sun Microsystems Inc."}
    assert find_rule(sun).name == "end-of-life"


def test_oracle_openjdk_build_is_free():
    decision = classify_license(oracle("11.0.2", vendorVersion="OpenJDK-11.0.2"))
    assert decision.requires_license is False
    assert "OpenJDK" in decision.explanation
    assert "long-term support" in decision.explanation


def test_unparseable_version_defaults_to_free():
    decision = classify_license(oracle("not-a-version"))
    assert decision.requires_license is False
    assert "defaulting to free" in decision.explanation


@pytest.mark.parametrize("version", ["1.6.0_45", "1.7.0_80"])
def test_end_of_life_versions_are_free(version):
    decision = classify_license(oracle(version))
    assert decision.requires_license is False
    assert "end-of-life" in decision.explanation


def test_java8_update_threshold():
    assert classify_license(oracle("1.8.0_210")).requires_license is False
    assert classify_license(oracle("1.8.0_211")).requires_license is True
    assert "Update 181" in classify_license(oracle("1.8.0_181")).explanation


def test_java8_update_wins_over_build_date():
    decision = classify_license(oracle("1.8.0_202", buildDate="2020-01-01"))
    assert decision.requires_license is False


def test_java8_falls_back_to_build_date():
    assert classify_license(oracle("1.8.0", buildDate="2019-04-15")).requires_license is False
    assert classify_license(oracle("1.8.0", buildDate="2019-04-16")).requires_license is True


@pytest.mark.parametrize("build_date", [
    None, "", "16/04/2019", "unavailable", "20190501", "2019-W18-3", "2019-05-01T00:00",
])
def test_java8_without_data_defaults_to_free(build_date):
    decision = classify_license(oracle("1.8", buildDate=build_date))
    assert decision.requires_license is False
    assert "unavailable" in decision.explanation


@pytest.mark.parametrize("version", ["9.0.4", "10.0.2", "12.0.2", "14", "16.0.2"])
def test_short_support_releases_require_license(version):
    decision = classify_license(oracle(version))
    assert decision.requires_license is True
    assert "non-LTS" in decision.explanation


def test_java11_always_requires_license():
    decision = classify_license(oracle("11.0.3", buildDate="2018-01-01"))
    assert decision.requires_license is True
    assert "always requires" in decision.explanation


def test_java17_patch_threshold():
    assert classify_license(oracle("17.0.12")).requires_license is False
    assert classify_license(oracle("17.0.13")).requires_license is True


def test_java17_falls_back_to_build_date():
    assert classify_license(oracle("17", buildDate="2024-09-30")).requires_license is False
    assert classify_license(oracle("17", buildDate="2024-10-01")).requires_license is True


def test_java17_without_data_defaults_to_free():
    decision = classify_license(oracle("17.0"))
    assert decision.requires_license is False
    assert "unavailable" in decision.explanation


@pytest.mark.parametrize("version", ["18", "19.0.2", "20.0.2"])
def test_nftc_short_support_releases_are_free(version):
    decision = classify_license(oracle(version, buildDate="2030-01-01"))
    assert decision.requires_license is False
    assert "NFTC" in decision.explanation


def test_java21_build_date_boundary():
    before = classify_license(oracle("21.0.4", buildDate="2026-09-30"))
    on = classify_license(oracle("21.0.4", buildDate="2026-10-01"))
    after = classify_license(oracle("25", buildDate="2027-01-20"))
    assert before.requires_license is False
    assert "NFTC" in before.explanation
    assert on.requires_license is True
    assert after.requires_license is True


def test_java21_without_build_date_is_free():
    decision = classify_license(oracle("21.0.1"))
    assert decision.requires_license is False
    assert "2026-10-01" in decision.explanation


@pytest.mark.parametrize("build_date", ["20261015", "2026-W42-4", "2026-288", " 2026-10-15x"])
def test_java21_non_calendar_build_dates_are_unavailable(build_date):
    decision = classify_license(oracle("21.0.5", buildDate=build_date))
    assert decision.requires_license is False
    assert "build date unavailable" in decision.explanation


@pytest.mark.parametrize("record", [
    {},
    {"vendor": ORACLE},
    {"version": None, "vendor": ORACLE},
    {"version": "1.8.0_x", "vendor": ORACLE, "buildDate": "2019-13-45"},
    {"version": "17.0.x", "vendor": "Sun", "vendorVersion": None},
    {"version": "99999999999999999999", "vendor": ORACLE},
])
def test_classify_is_total_with_non_empty_explanation(record):
    first = classify_license(record)
    second = classify_license(record)
    assert first == second
    assert first.explanation.strip()
