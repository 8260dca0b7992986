"""Ordering hunters by how closely they match a reference hunter."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class SdkAvailableHunter:
    """A hunter's location and identity."""

    isp: str = ""
    region: str = ""
    province: str = ""
    hunter_group: str = ""
    hunter_svr_name: str = ""
    hunter_ip: str = ""


def affinity_rank(hunter: SdkAvailableHunter, group: SdkAvailableHunter) -> int:
    """Rank ``hunter`` against ``group``: 1 is closest, 10 is unrelated."""
    same_isp = hunter.isp == group.isp
    same_region = hunter.region == group.region
    same_province = hunter.province == group.province
    if same_isp and same_province:
        return 1
    if same_isp and same_region:
        return 2
    if same_province:
        return 3
    if same_region:
        return 4
    return 10


def sort_by_affinity(
    hunters: Iterable[SdkAvailableHunter], group: SdkAvailableHunter
) -> list[SdkAvailableHunter]:
    """Return the hunters ordered from closest to farthest from ``group``."""
    return sorted(hunters, key=lambda hunter: affinity_rank(hunter, group))


def default_hunters() -> list[SdkAvailableHunter]:
    """The sample hunter list."""
    return [
        SdkAvailableHunter(isp="dx", region="huadong", province="fujian"),
        SdkAvailableHunter(isp="lt", region="huadong", province="fujian"),
        SdkAvailableHunter(isp="yd", region="huadong", province="fujian"),
        SdkAvailableHunter(isp="dx", region="huadong", province="anhui"),
        SdkAvailableHunter(isp="yd", region="xinan", province="yunnan"),
        SdkAvailableHunter(isp="yd", region="xinan", province="sichuan"),
    ]


def list_check() -> list[tuple[SdkAvailableHunter, list[SdkAvailableHunter]]]:
    """Re-sort the sample list against each of its members in turn.

    Returns each reference hunter with the ordering produced for it.
    """
    hunters = default_hunters()
    results = []
    for group in list(hunters):
        hunters = sort_by_affinity(hunters, group)
        results.append((group, hunters))
    return results