"""
Hand-authored navigation fixtures.

Each profile is an ascending list of offsets (ms) from a base time, plus how
far before "now" that base time sits when the store is built. The store turns
offsets into absolute timestamps; nothing here depends on the clock.

  full   30 events over ~7.5 minutes, base = now - 5 min, so playback
         straddles the present (roughly half past, half future).
  brief  3 events, base = now - 1 min.
"""

from dataclasses import dataclass

_PAGES = "/myapp/pages"


@dataclass(frozen=True)
class FixtureEntry:
    offset_ms: int
    url: str
    label: str
    action: str


@dataclass(frozen=True)
class FixtureProfile:
    name: str
    lead_ms: int                        # base time = now - lead_ms
    entries: tuple[FixtureEntry, ...]


def _entry(offset_ms: int, page: str, action: str) -> FixtureEntry:
    return FixtureEntry(
        offset_ms=offset_ms,
        url=f"{_PAGES}/url_{page}.html",
        label=f"URL_{page.upper()}",
        action=action,
    )


FULL = FixtureProfile(
    name="full",
    lead_ms=300_000,
    entries=(
        _entry(0, "a", "navigate"),
        _entry(5_000, "b", "click"),
        _entry(10_000, "c", "click"),
        _entry(15_000, "d", "backBtn"),
        _entry(20_000, "e", "formSubmit"),
        _entry(25_000, "f", "tabClick"),
        _entry(30_000, "g", "linkClick"),
        _entry(35_000, "h", "buttonClick"),
        _entry(45_000, "i", "linkClick"),
        _entry(50_000, "j", "formSubmit"),
        _entry(55_000, "k", "backBtn"),
        _entry(60_000, "l", "click"),
        _entry(65_000, "m", "navigate"),
        _entry(70_000, "a", "linkClick"),
        _entry(75_000, "b", "buttonClick"),
        _entry(80_000, "c", "navigate"),
        # quiet stretch, then a slower second burst
        _entry(224_000, "d", "click"),
        _entry(240_000, "e", "linkClick"),
        _entry(256_000, "f", "formSubmit"),
        _entry(272_000, "g", "buttonClick"),
        _entry(288_000, "h", "click"),
        _entry(305_000, "i", "navigate"),
        _entry(322_000, "j", "linkClick"),
        _entry(339_000, "k", "formSubmit"),
        _entry(356_000, "l", "click"),
        _entry(373_000, "m", "buttonClick"),
        _entry(390_000, "a", "navigate"),
        _entry(407_000, "b", "linkClick"),
        _entry(424_000, "c", "click"),
        _entry(441_000, "d", "formSubmit"),
    ),
)

BRIEF = FixtureProfile(
    name="brief",
    lead_ms=60_000,
    entries=(
        _entry(0, "a", "navigate"),
        _entry(5_000, "b", "click"),
        _entry(12_000, "c", "click"),
    ),
)

PROFILES: dict[str, FixtureProfile] = {p.name: p for p in (FULL, BRIEF)}


def get_profile(name: str) -> FixtureProfile:
    try:
        return PROFILES[name]
    except KeyError:
        raise ValueError(
            f"Unknown fixture profile {name!r} (expected one of {sorted(PROFILES)})"
        ) from None
