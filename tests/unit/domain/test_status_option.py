"""Tests for the status option lookup table."""

from nightbase.domain.value_objects.enums import CastStatus
from nightbase.domain.value_objects.status_option import (
    FALLBACK_COLOR,
    STATUS_OPTIONS,
    get_status_option,
)


def test_known_statuses():
    assert get_status_option("waiting").label == "待機"
    assert get_status_option("serving").label == "接客中"
    assert get_status_option("ended").label == "終了"


def test_fee_tags_are_not_statuses():
    opt = get_status_option("nomination")
    assert opt.label == "指名"
    assert opt.is_status is False


def test_lookup_by_enum_member():
    assert get_status_option(CastStatus.SERVING).value == "serving"


def test_unknown_value_falls_back_to_raw_label():
    opt = get_status_option("requested")
    assert opt.label == "requested"
    assert opt.color == FALLBACK_COLOR
    assert opt.is_status is False


def test_empty_or_missing_value():
    assert get_status_option("").label == "不明"
    assert get_status_option(None).label == "不明"


def test_option_values_are_unique():
    values = [o.value for o in STATUS_OPTIONS]
    assert len(values) == len(set(values))
