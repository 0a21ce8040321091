# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Category defaults - per-category useful life and resale assumptions.

Pure configuration data. A record whose category has no entry cannot be
valued; the lookup raises instead of falling back to a generic entry.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Union

from pydantic import Field, model_validator

from ..core.exceptions import UnknownCategoryError
from ..core.primitives import Model, Percentage, StrictlyPositiveFloat, UsageUnitEnum

logger = logging.getLogger(__name__)


class CategoryDefaults(Model):
    """
    Default assumptions for one equipment category.

    Attributes:
        category: Category key referenced by equipment records
        default_useful_life: Useful life in years when a record has no override
        default_resale_percent: Resale value at end of life as a percentage of
            replacement cost; the floor of the resale curve
        unit: Unit the category is budgeted in for the FMS rollup
        notes: Free-form guidance shown next to the defaults
    """

    category: str
    default_useful_life: StrictlyPositiveFloat
    default_resale_percent: Percentage = 0.0
    unit: UsageUnitEnum = UsageUnitEnum.HOURS
    notes: str = ""


class CategoryDefaultsTable(Model):
    """
    Lookup from category key to its defaults.

    Examples:
        >>> table = CategoryDefaultsTable.from_entries([
        ...     CategoryDefaults(category="Trailer", default_useful_life=10.0, default_resale_percent=35.0),
        ... ])
        >>> table.lookup("Trailer").default_useful_life
        10.0
    """

    entries: Dict[str, CategoryDefaults] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_keys_match_categories(self) -> "CategoryDefaultsTable":
        """Ensure every entry is stored under its own category key."""
        for key, entry in self.entries.items():
            if key != entry.category:
                raise ValueError(
                    f"Category defaults stored under {key!r} belong to {entry.category!r}"
                )
        return self

    @classmethod
    def from_entries(cls, entries: Iterable[CategoryDefaults]) -> "CategoryDefaultsTable":
        """Build a table from entries; a later duplicate replaces an earlier one."""
        return cls(entries={entry.category: entry for entry in entries})

    def lookup(self, category: str) -> CategoryDefaults:
        """
        Return the defaults for ``category``.

        Raises:
            UnknownCategoryError: If the category has no entry.
        """
        try:
            return self.entries[category]
        except KeyError:
            raise UnknownCategoryError(category) from None

    def __contains__(self, category: object) -> bool:
        return category in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def categories(self) -> List[str]:
        """Configured category keys, sorted."""
        return sorted(self.entries)

    def with_overrides(
        self,
        overrides: Union[Iterable[CategoryDefaults], Mapping[str, Mapping[str, object]]],
    ) -> "CategoryDefaultsTable":
        """
        Return a new table with user-edited defaults applied.

        ``overrides`` is either complete ``CategoryDefaults`` entries (which
        replace or add categories) or a mapping of category key to a partial
        update, e.g. ``{"Trailer": {"default_useful_life": 12}}``. Partial
        updates for a category that does not exist raise UnknownCategoryError.
        """
        entries = dict(self.entries)
        if isinstance(overrides, Mapping):
            for category, update in overrides.items():
                base = self.lookup(category)
                entries[category] = CategoryDefaults.model_validate(
                    {**base.model_dump(), **dict(update), "category": category}
                )
        else:
            for entry in overrides:
                if entry.category not in entries:
                    logger.debug(f"Adding category defaults for new category {entry.category!r}")
                entries[entry.category] = entry
        return CategoryDefaultsTable(entries=entries)


STANDARD_CATEGORY_DEFAULTS = CategoryDefaultsTable.from_entries(
    [
        CategoryDefaults(
            category="Excavation",
            default_useful_life=7.0,
            default_resale_percent=25.0,
            notes="Mini excavators and compact equipment. High usage, significant wear. "
            "Resale conservative due to hour accumulation.",
        ),
        CategoryDefaults(
            category="Skid Steer / Loader",
            default_useful_life=6.0,
            default_resale_percent=20.0,
            notes="Heavy daily use expected. Hydraulics and undercarriage are major wear "
            "points. Resale depends heavily on hours.",
        ),
        CategoryDefaults(
            category="Truck / Vehicle",
            default_useful_life=5.0,
            default_resale_percent=30.0,
            notes="Work trucks depreciate fast but maintain some resale. Consider mileage "
            "and body condition.",
        ),
        CategoryDefaults(
            category="Heavy Compaction Equipment",
            default_useful_life=8.0,
            default_resale_percent=20.0,
            notes="Plate compactors, rollers. Durable but specialized market limits "
            "resale options.",
        ),
        CategoryDefaults(
            category="Light Compaction Equipment",
            default_useful_life=5.0,
            default_resale_percent=10.0,
            notes="Jumping jacks, small plates. High abuse rate, often replaced rather "
            "than repaired.",
        ),
        CategoryDefaults(
            category="Commercial Mowers",
            default_useful_life=4.0,
            default_resale_percent=15.0,
            notes="Zero-turns and stand-ons. High hours in season. Hydros and deck wear "
            "are primary concerns.",
        ),
        CategoryDefaults(
            category="Handheld Power Tools",
            default_useful_life=3.0,
            default_resale_percent=5.0,
            notes="Trimmers, blowers, chainsaws. Short life, minimal resale. Consider "
            "consumable in planning.",
        ),
        CategoryDefaults(
            category="Large Demo & Specialty Tools",
            default_useful_life=5.0,
            default_resale_percent=15.0,
            notes="Concrete saws, hammer drills, stump grinders. Specialized use may "
            "extend life if well-maintained.",
        ),
        CategoryDefaults(
            category="Trailer",
            default_useful_life=10.0,
            default_resale_percent=35.0,
            notes="Long useful life if maintained. Floor and tires are main wear items. "
            "Good resale if not abused.",
        ),
        CategoryDefaults(
            category="Snow Equipment",
            default_useful_life=8.0,
            default_resale_percent=25.0,
            notes="Plows, spreaders, pushers. Seasonal use extends calendar life. Salt "
            "damage is main concern.",
        ),
        CategoryDefaults(
            category="Shop / Other",
            default_useful_life=7.0,
            default_resale_percent=10.0,
            notes="Welders, compressors, generators. Varies widely. Default is "
            "conservative mid-range.",
        ),
    ]
)
