#!/usr/bin/env python3
"""
Script to check the translation catalogs (.po files) used for dictionary lookups.
Run this after updating .po translation files.

Argument translation looks native text up by its translation, so two msgids
sharing one msgstr make that lookup ambiguous; those are reported as errors.
Untranslated and fuzzy entries are reported as warnings.
"""

import sys
from collections import defaultdict
from pathlib import Path
from babel.messages.pofile import read_po

project_root = Path(__file__).parent.parent

LOCALES_DIR = project_root / "i18n_proxy" / "app" / "locales"


def check_catalog(po_file: Path) -> tuple[list[str], list[str]]:
    """Return (errors, warnings) for one catalog."""
    language = po_file.parent.parent.name
    with open(po_file, "rb") as f:
        catalog = read_po(f, locale=language)

    errors = []
    warnings = []
    natives_by_translation = defaultdict(list)

    for message in catalog:
        if not message.id or not isinstance(message.id, str):
            continue
        if not message.string:
            warnings.append(f"{language}: untranslated {message.id!r}")
            continue
        if message.fuzzy:
            warnings.append(f"{language}: fuzzy {message.id!r}")
            continue
        natives_by_translation[message.string].append(message.id)

    for translation, natives in natives_by_translation.items():
        if len(natives) > 1:
            errors.append(
                f"{language}: {translation!r} translates {len(natives)} native texts: "
                f"{', '.join(repr(n) for n in natives)}"
            )

    return errors, warnings


def check_catalogs():
    """Check all .po files."""
    print("Checking translation catalogs...")

    if not LOCALES_DIR.exists():
        print(f"Error: Locales directory not found at {LOCALES_DIR}")
        sys.exit(1)

    po_files = sorted(LOCALES_DIR.rglob("*.po"))

    if not po_files:
        print(f"No .po files found in {LOCALES_DIR}")
        return

    errors = []
    for po_file in po_files:
        print(f"Checking: {po_file.relative_to(project_root)}")
        try:
            file_errors, file_warnings = check_catalog(po_file)
        except Exception as e:
            errors.append(f"Error reading {po_file}: {e}")
            continue
        errors.extend(file_errors)
        for warning in file_warnings:
            print(f"  ! {warning}")

    print(f"\n{'=' * 60}")
    print(f"Checked {len(po_files)} catalog(s)")

    if errors:
        print(f"{len(errors)} error(s) occurred:")
        for error in errors:
            print(f"  - {error}")
        sys.exit(1)
    else:
        print("All catalogs are usable for two-way lookups.")


if __name__ == "__main__":
    check_catalogs()
