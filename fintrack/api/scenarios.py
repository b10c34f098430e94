"""
Scenario management API endpoints.

A scenario is a named set of calculator inputs. Inputs are validated
against the calculator's request schema and the results are cached on the
scenario every time it is saved or re-evaluated.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from fintrack.db.database import get_db
from fintrack.db.models import Scenario
from fintrack.services.scenario_files import build_export_document
from fintrack.services.scenarios import evaluate_inputs

logger = logging.getLogger(__name__)

router = APIRouter()


class ScenarioCreate(BaseModel):
    """Schema for creating or replacing a scenario."""

    name: str
    kind: str
    description: Optional[str] = None
    inputs: Dict[str, Any]


class ScenarioResponse(BaseModel):
    """Schema for scenario response."""

    id: str
    name: str
    kind: str
    description: Optional[str]
    inputs: Dict[str, Any]
    results: Optional[Dict[str, Any]]

    model_config = {"from_attributes": True}


class ScenarioListResponse(BaseModel):
    scenarios: List[ScenarioResponse]
    total: int


def _evaluate_or_400(kind: str, inputs: Dict[str, Any]):
    try:
        return evaluate_inputs(kind, inputs)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _get_scenario_or_404(db: Session, scenario_id: str) -> Scenario:
    scenario = db.query(Scenario).filter(Scenario.id == scenario_id).first()
    if scenario is None:
        raise HTTPException(status_code=404, detail="Scenario not found")
    return scenario


def _check_name_available(db: Session, name: str, scenario_id: Optional[str] = None):
    query = db.query(Scenario).filter(Scenario.name == name)
    if scenario_id is not None:
        query = query.filter(Scenario.id != scenario_id)
    if query.first() is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"A scenario named {name!r} already exists",
        )


@router.get("/", response_model=ScenarioListResponse)
async def list_scenarios(kind: Optional[str] = None, db: Session = Depends(get_db)):
    """List all scenarios, optionally filtered by kind."""
    query = db.query(Scenario)
    if kind:
        query = query.filter(Scenario.kind == kind)
    scenarios = query.order_by(Scenario.name).all()
    return {"scenarios": scenarios, "total": len(scenarios)}


@router.get("/export")
async def export_scenarios(db: Session = Depends(get_db)):
    """Export every scenario as a JSON document (same format as the file export)."""
    return build_export_document(db)


@router.post("/", response_model=ScenarioResponse, status_code=status.HTTP_201_CREATED)
async def create_scenario(scenario_data: ScenarioCreate, db: Session = Depends(get_db)):
    """Create a new scenario and cache its results."""
    _check_name_available(db, scenario_data.name)
    inputs, results = _evaluate_or_400(scenario_data.kind, scenario_data.inputs)

    scenario = Scenario(
        name=scenario_data.name,
        kind=scenario_data.kind,
        description=scenario_data.description,
        inputs=inputs,
        results=results,
    )
    db.add(scenario)
    db.commit()
    db.refresh(scenario)

    logger.info(f"Created {scenario.kind} scenario {scenario.name!r} ({scenario.id})")
    return scenario


@router.get("/{scenario_id}", response_model=ScenarioResponse)
async def get_scenario(scenario_id: str, db: Session = Depends(get_db)):
    """Get a scenario by ID."""
    return _get_scenario_or_404(db, scenario_id)


@router.put("/{scenario_id}", response_model=ScenarioResponse)
async def update_scenario(
    scenario_id: str, scenario_data: ScenarioCreate, db: Session = Depends(get_db)
):
    """Replace a scenario's fields and re-evaluate it."""
    scenario = _get_scenario_or_404(db, scenario_id)
    _check_name_available(db, scenario_data.name, scenario_id)
    inputs, results = _evaluate_or_400(scenario_data.kind, scenario_data.inputs)

    scenario.name = scenario_data.name
    scenario.kind = scenario_data.kind
    scenario.description = scenario_data.description
    scenario.inputs = inputs
    scenario.results = results
    db.commit()
    db.refresh(scenario)

    logger.info(f"Updated scenario {scenario.name!r} ({scenario.id})")
    return scenario


@router.post("/{scenario_id}/evaluate", response_model=ScenarioResponse)
async def evaluate_scenario(scenario_id: str, db: Session = Depends(get_db)):
    """Recalculate a stored scenario and refresh its cached results."""
    scenario = _get_scenario_or_404(db, scenario_id)
    _, results = _evaluate_or_400(scenario.kind, scenario.inputs)

    scenario.results = results
    db.commit()
    db.refresh(scenario)
    return scenario


@router.delete("/{scenario_id}")
async def delete_scenario(scenario_id: str, db: Session = Depends(get_db)):
    """Delete a scenario."""
    scenario = _get_scenario_or_404(db, scenario_id)
    db.delete(scenario)
    db.commit()

    logger.info(f"Deleted scenario {scenario_id}")
    return {"deleted": True}
