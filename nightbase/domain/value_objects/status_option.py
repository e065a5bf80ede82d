"""StatusOption value object — display label and color for a cast status or fee tag."""

from __future__ import annotations

from dataclasses import dataclass

from nightbase.domain.value_objects.enums import CastStatus, FeeTag

UNKNOWN_LABEL = "不明"
FALLBACK_COLOR = "bg-slate-100 text-slate-700 dark:bg-slate-800 dark:text-slate-300"


@dataclass(frozen=True)
class StatusOption:
    value: str
    label: str
    color: str
    is_status: bool


STATUS_OPTIONS: tuple[StatusOption, ...] = (
    StatusOption(
        CastStatus.WAITING.value, "待機",
        "bg-gray-100 text-gray-700 dark:bg-gray-800 dark:text-gray-300", True,
    ),
    StatusOption(
        CastStatus.SERVING.value, "接客中",
        "bg-blue-100 text-blue-700 dark:bg-blue-900 dark:text-blue-300", True,
    ),
    StatusOption(
        CastStatus.ENDED.value, "終了",
        "bg-slate-200 text-slate-500 dark:bg-slate-700 dark:text-slate-400", True,
    ),
    StatusOption(
        FeeTag.NOMINATION.value, "指名",
        "bg-pink-100 text-pink-700 dark:bg-pink-900 dark:text-pink-300", False,
    ),
    StatusOption(
        FeeTag.COMPANION.value, "場内",
        "bg-amber-100 text-amber-700 dark:bg-amber-900 dark:text-amber-300", False,
    ),
    StatusOption(
        FeeTag.DOUHAN.value, "同伴",
        "bg-purple-100 text-purple-700 dark:bg-purple-900 dark:text-purple-300", False,
    ),
)

_BY_VALUE: dict[str, StatusOption] = {opt.value: opt for opt in STATUS_OPTIONS}


def get_status_option(value: str | None) -> StatusOption:
    """Look up the display option for *value*.

    Unknown values get a neutral option labelled with the raw value, so the
    board can still render records with statuses it does not know about.
    """
    option = _BY_VALUE.get(value or "")
    if option is not None:
        return option
    return StatusOption(
        value=value or "",
        label=value or UNKNOWN_LABEL,
        color=FALLBACK_COLOR,
        is_status=False,
    )
