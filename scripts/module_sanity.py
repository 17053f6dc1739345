#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path
import sys

import yaml

REQUIRED_FIELDS = ("name", "title", "description", "category", "mount")


def check_manifest(module_dir: Path) -> list[str]:
    manifest = module_dir / "module.yaml"
    try:
        data = yaml.safe_load(manifest.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        return [f"{module_dir.name}: invalid YAML ({exc})"]
    if not isinstance(data, dict):
        return [f"{module_dir.name}: module.yaml must be a mapping"]

    errors: list[str] = []
    for field in REQUIRED_FIELDS:
        if not str(data.get(field) or "").strip():
            errors.append(f"{module_dir.name}: missing {field}")

    if str(data.get("standard_version") or "").strip() != "1.0":
        errors.append(f"{module_dir.name}: standard_version must be '1.0'")

    mount = str(data.get("mount") or "")
    if mount and (not mount.startswith("/") or mount == "/" or " " in mount):
        errors.append(f"{module_dir.name}: invalid mount '{mount}'")

    entrypoints = data.get("entrypoints") or {}
    api = entrypoints.get("api") if isinstance(entrypoints, dict) else None
    if not api:
        errors.append(f"{module_dir.name}: missing entrypoints.api")
    elif ":" not in str(api):
        errors.append(f"{module_dir.name}: entrypoints.api must be module:app")
    return errors


def check_modules(modules_dir: Path) -> list[str]:
    errors: list[str] = []
    for module_dir in sorted(modules_dir.iterdir()):
        if module_dir.is_dir() and (module_dir / "module.yaml").exists():
            errors.extend(check_manifest(module_dir))
    return errors


def main() -> int:
    root = Path(__file__).resolve().parents[1]
    errors = check_modules(root / "modules")

    if errors:
        print("Module sanity check failed:\n")
        for issue in errors:
            print(f"- {issue}")
        return 1

    print("Module sanity check passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
