from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ActivityCode, DestinationCode


@dataclass(frozen=True)
class ActivityType:
    """Catalog entry for one kind of billable duty."""

    id: str
    label: str
    requires_holiday: bool = False


@dataclass(frozen=True)
class Destination:
    """Catalog entry for a travel-distance tier."""

    id: str
    label: str


ACTIVITY_TYPES: tuple[ActivityType, ...] = (
    ActivityType(ActivityCode.A.value, "A:休日部活(1日)", requires_holiday=True),
    ActivityType(ActivityCode.B.value, "B:休日部活(半日)", requires_holiday=True),
    ActivityType(ActivityCode.C.value, "C:指定大会（対外運動競技等引率）"),
    ActivityType(ActivityCode.D.value, "D:指定外大会"),
    ActivityType(ActivityCode.E.value, "E:遠征（部活動指導）"),
    ActivityType(ActivityCode.F.value, "F:校内合宿（宿泊を伴う指導）"),
    ActivityType(ActivityCode.G.value, "G:研修旅行等引率"),
    ActivityType(ActivityCode.DISASTER.value, "災害業務"),
    ActivityType(ActivityCode.CUSTOM.value, "その他（手入力）"),
)

DESTINATIONS: tuple[Destination, ...] = (
    Destination(DestinationCode.SCHOOL.value, "校内"),
    Destination(DestinationCode.INSIDE_SHORT.value, "管内（庄内・新庄最上）"),
    Destination(DestinationCode.INSIDE_LONG.value, "県内（片道120km以上）"),
    Destination(DestinationCode.OUTSIDE.value, "県外"),
)

# Destination ids written by older versions of the entry form.
LEGACY_DESTINATION_IDS = {
    "kannai": DestinationCode.INSIDE_SHORT.value,
    "kennai_short": DestinationCode.INSIDE_SHORT.value,
    "kennai_long": DestinationCode.INSIDE_LONG.value,
    "kengai": DestinationCode.OUTSIDE.value,
}

_DESCRIPTIONS = {
    ActivityCode.A: "土日の部活動指導（1日）- 2,400円",
    ActivityCode.B: "土日の部活動指導（半日）- 1,700円",
    ActivityCode.C: "対外運動競技等の引率 - 基本3,400円（運転・距離により変動）",
    ActivityCode.D: "指定外大会 - 2,400円",
    ActivityCode.E: "遠征での部活動指導 - 休日/勤務日・運転により変動",
    ActivityCode.F: "校内合宿（宿泊を伴う指導） - 休日/勤務日・宿泊により変動",
    ActivityCode.G: "研修旅行等の引率 - 3,400円",
    ActivityCode.OTHER: "その他の業務 - 6,000円",
}

_ACTIVITIES_BY_ID = {a.id: a for a in ACTIVITY_TYPES}
_ACTIVITIES_BY_LABEL = {a.label: a for a in ACTIVITY_TYPES}
_DESTINATIONS_BY_ID = {d.id: d for d in DESTINATIONS}
_DESTINATIONS_BY_LABEL = {d.label: d for d in DESTINATIONS}


def find_activity(activity_id: str) -> Optional[ActivityType]:
    return _ACTIVITIES_BY_ID.get(activity_id)


def find_destination(destination_id: str) -> Optional[Destination]:
    return _DESTINATIONS_BY_ID.get(destination_id)


def activity_description(activity_id: str) -> str:
    code = ActivityCode.parse(activity_id)
    if code is None:
        return ""
    return _DESCRIPTIONS.get(code, "")


def needs_driving_selection(activity_id: str) -> bool:
    """Whether the entry form should ask about driving for this activity.

    F is an on-site camp, so it never asks.
    """
    return ActivityCode.parse(activity_id) in (ActivityCode.C, ActivityCode.E)


def needs_accommodation_selection(activity_id: str) -> bool:
    return ActivityCode.parse(activity_id) in (ActivityCode.E, ActivityCode.F)


def normalize_destination_id(value: Optional[str]) -> str:
    """Map a stored destination id or label to a current destination id.

    Unknown values fall back to the nearby-region tier, as the entry form does.
    """
    if not value:
        return DestinationCode.INSIDE_SHORT.value
    if value in _DESTINATIONS_BY_ID:
        return value
    if value in LEGACY_DESTINATION_IDS:
        return LEGACY_DESTINATION_IDS[value]
    found = _DESTINATIONS_BY_LABEL.get(value)
    if found:
        return found.id
    return DestinationCode.INSIDE_SHORT.value


def activity_id_from_label(value: str) -> str:
    """Stored records carry the activity label; map it back to the id."""
    found = _ACTIVITIES_BY_LABEL.get(value)
    return found.id if found else value
