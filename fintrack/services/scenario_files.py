"""
Scenario file export and import.

Scenarios are written to a single JSON document:

    {
        "version": 1,
        "exported_at": "2025-01-01T12:00:00",
        "scenarios": [
            {"name": ..., "kind": ..., "description": ..., "inputs": {...}, "results": {...}}
        ]
    }

Results are informational; on import they are recalculated from the inputs.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError
from sqlalchemy.orm import Session

from fintrack.db.models import Scenario
from fintrack.services.scenarios import evaluate_inputs

logger = logging.getLogger(__name__)

FILE_FORMAT_VERSION = 1


class ScenarioFileError(ValueError):
    """Raised when a scenario file cannot be read or is malformed."""


def scenario_to_dict(scenario: Scenario) -> Dict[str, Any]:
    return {
        "name": scenario.name,
        "kind": scenario.kind,
        "description": scenario.description,
        "inputs": scenario.inputs,
        "results": scenario.results,
    }


def build_export_document(db: Session) -> Dict[str, Any]:
    """Build the export document for every stored scenario."""
    scenarios = db.query(Scenario).order_by(Scenario.name).all()
    return {
        "version": FILE_FORMAT_VERSION,
        "exported_at": datetime.utcnow().isoformat(timespec="seconds"),
        "scenarios": [scenario_to_dict(s) for s in scenarios],
    }


def export_scenarios(db: Session, path: Union[str, Path]) -> int:
    """
    Write all scenarios to a JSON file.

    Returns:
        Number of scenarios written
    """
    document = build_export_document(db)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=2), encoding="utf-8")

    count = len(document["scenarios"])
    logger.info(f"Exported {count} scenarios to {path}")
    return count


def _read_document(path: Path) -> Dict[str, Any]:
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ScenarioFileError(f"Scenario file not found: {path}")
    except json.JSONDecodeError as e:
        raise ScenarioFileError(f"Invalid JSON in {path}: {e}")

    if not isinstance(document, dict) or not isinstance(
        document.get("scenarios"), list
    ):
        raise ScenarioFileError("Scenario file must contain a 'scenarios' list")

    version = document.get("version")
    if version != FILE_FORMAT_VERSION:
        raise ScenarioFileError(f"Unsupported scenario file version: {version!r}")

    return document


def import_scenarios(
    db: Session, path: Union[str, Path], replace: bool = False
) -> Dict[str, int]:
    """
    Load scenarios from a JSON file.

    Every entry is validated and recalculated before anything is written, so
    a bad entry leaves the database untouched. Scenarios whose name already
    exists are skipped unless `replace` is set.

    Returns:
        Counts of created, replaced and skipped scenarios

    Raises:
        ScenarioFileError: The file or one of its entries is invalid
    """
    document = _read_document(Path(path))

    prepared = []
    seen_names = set()
    for index, entry in enumerate(document["scenarios"], start=1):
        try:
            name = entry["name"]
            kind = entry["kind"]
            inputs, results = evaluate_inputs(kind, entry.get("inputs") or {})
        except (KeyError, TypeError) as e:
            raise ScenarioFileError(f"Scenario #{index} is missing a field: {e}")
        except ValidationError as e:
            raise ScenarioFileError(
                f"Scenario #{index} ({entry.get('name')!r}) has invalid inputs: "
                f"{e.error_count()} error(s)"
            )
        except ValueError as e:
            raise ScenarioFileError(f"Scenario #{index}: {e}")
        if name in seen_names:
            raise ScenarioFileError(f"Scenario #{index}: duplicate name {name!r}")
        seen_names.add(name)
        prepared.append((name, kind, entry.get("description"), inputs, results))

    counts = {"created": 0, "replaced": 0, "skipped": 0}
    for name, kind, description, inputs, results in prepared:
        existing = db.query(Scenario).filter(Scenario.name == name).first()
        if existing is not None and not replace:
            counts["skipped"] += 1
            continue

        if existing is not None:
            existing.kind = kind
            existing.description = description
            existing.inputs = inputs
            existing.results = results
            counts["replaced"] += 1
        else:
            db.add(
                Scenario(
                    name=name,
                    kind=kind,
                    description=description,
                    inputs=inputs,
                    results=results,
                )
            )
            counts["created"] += 1

    db.commit()
    logger.info(
        f"Imported scenarios from {path}: {counts['created']} created, "
        f"{counts['replaced']} replaced, {counts['skipped']} skipped"
    )
    return counts
