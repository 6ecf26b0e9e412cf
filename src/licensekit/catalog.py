# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

r"""Bundled license catalog and the standard-license membership predicate.

The expression parser only needs a ``str -> bool`` predicate to decide
whether an ID is a catalog (standard) license.  This module provides the
default one, backed by ``data/licenses.toml`` shipped with the package.
Callers with their own license list pass their own predicate instead;
nothing here fetches, caches to disk, or persists license definitions.

Data format::

    license_list_version = "3.25"

    [licenses.MIT]
    name = "MIT License"
    osi_approved = true

Usage::

    from licensekit.catalog import LicenseCatalog, default_catalog

    catalog = default_catalog()
    catalog.is_standard_license_id('MIT')  # True
    catalog.is_standard_license_id('mit')  # False (IDs match exactly)

    custom = LicenseCatalog.load(extra_ids=('LicenseRef-Acme',))
"""

from __future__ import annotations

import functools
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from licensekit.errors import CatalogError

__all__ = [
    'CatalogEntry',
    'LicenseCatalog',
    'default_catalog',
]

_DATA_DIR = Path(__file__).resolve().parent / 'data'
_LICENSES_TOML = _DATA_DIR / 'licenses.toml'


@dataclass(frozen=True)
class CatalogEntry:
    """Metadata for one standard license.

    Attributes:
        id: Short identifier (the catalog key).
        name: Human-readable full name.
        osi_approved: Whether OSI has approved this license.
    """

    id: str
    name: str
    osi_approved: bool = False


@dataclass
class LicenseCatalog:
    """An in-memory set of standard license identifiers.

    Attributes:
        version: The license list version the data was taken from.
        entries: Mapping from license ID to :class:`CatalogEntry`.
    """

    version: str = ''
    entries: dict[str, CatalogEntry] = field(default_factory=dict)

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        *,
        extra_ids: Iterable[str] = (),
    ) -> LicenseCatalog:
        """Load a catalog from a TOML file.

        Args:
            path: Catalog TOML file. Defaults to the bundled
                ``data/licenses.toml``.
            extra_ids: Additional IDs to treat as standard licenses.

        Returns:
            The loaded catalog.

        Raises:
            CatalogError: If the file is unreadable or malformed.
        """
        catalog_path = path or _LICENSES_TOML
        try:
            with catalog_path.open('rb') as f:
                data = tomllib.load(f)
        except OSError as exc:
            raise CatalogError([f'{catalog_path}: {exc.strerror or exc}']) from exc
        except tomllib.TOMLDecodeError as exc:
            raise CatalogError([f'{catalog_path}: {exc}']) from exc

        catalog = cls()
        catalog._load_data(data)  # noqa: SLF001
        for license_id in extra_ids:
            catalog.entries.setdefault(license_id, CatalogEntry(id=license_id, name=license_id))
        return catalog

    def _load_data(self, data: dict[str, object]) -> None:
        errors: list[str] = []
        version = data.get('license_list_version', '')
        if not isinstance(version, str):
            errors.append(f'license_list_version: expected string, got {type(version).__name__}')
        else:
            self.version = version
        licenses = data.get('licenses', {})
        if not isinstance(licenses, dict):
            raise CatalogError([f'licenses: expected a table, got {type(licenses).__name__}'])
        for license_id, info in licenses.items():
            if not isinstance(info, dict):
                errors.append(f'[licenses.{license_id}]: expected a table, got {type(info).__name__}')
                continue
            if any(ch.isspace() or ch in '()' for ch in license_id):
                errors.append(f'[licenses.{license_id}]: IDs may not contain whitespace or parentheses')
            name = info.get('name', license_id)
            if not isinstance(name, str):
                errors.append(f'[licenses.{license_id}].name: expected string, got {type(name).__name__}')
                name = license_id
            osi = info.get('osi_approved', False)
            if not isinstance(osi, bool):
                errors.append(f'[licenses.{license_id}].osi_approved: expected bool, got {type(osi).__name__}')
                osi = False
            self.entries[license_id] = CatalogEntry(id=license_id, name=name, osi_approved=osi)
        if errors:
            raise CatalogError(errors)

    def is_standard_license_id(self, license_id: str) -> bool:
        """Return ``True`` if *license_id* is in the catalog (exact match)."""
        return license_id in self.entries

    def license_ids(self) -> list[str]:
        """Return all catalog IDs, sorted."""
        return sorted(self.entries)

    def name(self, license_id: str) -> str:
        """Return the full name of *license_id*, or the ID itself if unknown."""
        entry = self.entries.get(license_id)
        return entry.name if entry else license_id


@functools.cache
def default_catalog() -> LicenseCatalog:
    """Return the bundled catalog, loaded once per process."""
    return LicenseCatalog.load()
