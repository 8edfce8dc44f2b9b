"""Catalog, limit, ledger and meal plan endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, status

from sugar_tracker.api.models import (
    EvaluateRequest,
    FoodRequest,
    LimitRequest,
    PlanRequest,
    SelectionItem,
    SelectionRequest,
)
from sugar_tracker.api.session import require_session
from sugar_tracker.domain.foods import FoodCandidate
from sugar_tracker.services.selection import FoodSelection

if TYPE_CHECKING:
    from sugar_tracker.containers import AppContainer
    from sugar_tracker.domain.foods import FoodItem
    from sugar_tracker.domain.limits import AdditionCheck, SugarSummary
    from sugar_tracker.domain.records import MealPlan, SugarEntry

router = APIRouter(tags=["tracker"])


@router.get("/foods")
async def list_foods(
    request: Request, query: str | None = None, healthy_only: bool = False
) -> dict[str, object]:
    """Search the catalog; an empty query returns every food."""
    container: AppContainer = request.app.state.container
    service = container.catalog_service
    foods = service.search(query, healthy_only=healthy_only)
    return {
        "foods": [_serialize_food(food) for food in foods],
        "loading": service.loading,
    }


@router.post(
    "/foods",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_session)],
)
async def add_food(payload: FoodRequest, request: Request) -> dict[str, object]:
    """Add a food to the catalog."""
    container: AppContainer = request.app.state.container
    result = await container.catalog_service.add(
        FoodCandidate(
            name=payload.name,
            sugar_content=payload.sugar_content,
            is_healthy=payload.is_healthy,
        )
    )
    return {"food": _serialize_food(result.value), "persisted": result.persisted}


@router.get("/limit")
async def get_limit(request: Request) -> dict[str, object]:
    """Return the current daily limit."""
    container: AppContainer = request.app.state.container
    service = container.limit_service
    return {"limit": service.get_limit(), "loading": service.loading}


@router.put("/limit", dependencies=[Depends(require_session)])
async def set_limit(payload: LimitRequest, request: Request) -> dict[str, object]:
    """Change the daily limit."""
    container: AppContainer = request.app.state.container
    result = await container.limit_service.set_limit(payload.limit)
    return {"limit": result.value, "persisted": result.persisted}


@router.post("/limit/evaluate")
async def evaluate_selection(
    payload: EvaluateRequest, request: Request
) -> dict[str, object]:
    """Summarize a selection and check the warning for a candidate food."""
    container: AppContainer = request.app.state.container
    selection = _build_selection(container, payload.foods)
    total = selection.total
    body: dict[str, object] = {
        "summary": _serialize_summary(container.limit_service.summarize(total)),
        "candidate": None,
    }
    if payload.candidate is not None:
        candidate = _resolve_food(container, payload.candidate)
        check = container.limit_service.check_addition(total, candidate)
        body["candidate"] = _serialize_check(candidate, check)
    return body


@router.get("/entries")
async def list_entries(request: Request) -> dict[str, object]:
    """Return the intake history, newest first."""
    container: AppContainer = request.app.state.container
    service = container.ledger_service
    return {
        "entries": [
            _serialize_entry(container, entry) for entry in service.list_recent()
        ],
        "loading": service.loading,
    }


@router.get("/entries/{entry_id}")
async def entry_detail(entry_id: str, request: Request) -> dict[str, object]:
    """Return a single entry with its foods."""
    container: AppContainer = request.app.state.container
    entry = container.ledger_service.get(entry_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return _serialize_entry(container, entry)


@router.post(
    "/entries",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_session)],
)
async def submit_entry(
    payload: SelectionRequest, request: Request
) -> dict[str, object]:
    """Record today's intake."""
    container: AppContainer = request.app.state.container
    selection = _build_selection(container, payload.foods)
    result = await selection.submit_entry(container.ledger_service)
    return {
        "entry": _serialize_entry(container, result.value),
        "persisted": result.persisted,
    }


@router.get("/plans")
async def list_plans(request: Request) -> dict[str, object]:
    """Return saved meal plans."""
    container: AppContainer = request.app.state.container
    service = container.plan_service
    return {
        "plans": [_serialize_plan(container, plan) for plan in service.list()],
        "loading": service.loading,
    }


@router.get("/plans/{plan_id}")
async def plan_detail(plan_id: str, request: Request) -> dict[str, object]:
    """Return a single meal plan."""
    container: AppContainer = request.app.state.container
    plan = container.plan_service.get(plan_id)
    if plan is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return _serialize_plan(container, plan)


@router.post(
    "/plans",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_session)],
)
async def save_plan(payload: PlanRequest, request: Request) -> dict[str, object]:
    """Save a named meal plan."""
    container: AppContainer = request.app.state.container
    selection = _build_selection(container, payload.foods)
    result = await selection.submit_plan(container.plan_service, payload.name)
    return {
        "plan": _serialize_plan(container, result.value),
        "persisted": result.persisted,
    }


def _build_selection(
    container: AppContainer, items: list[SelectionItem]
) -> FoodSelection:
    selection = FoodSelection()
    for item in items:
        selection.add(_resolve_food(container, item))
    return selection


def _resolve_food(container: AppContainer, item: SelectionItem) -> FoodItem:
    catalog = container.catalog_service
    if item.food_id:
        food = catalog.find(item.food_id)
        if food is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown food id {item.food_id}",
            )
        return food
    sugar_text = None if item.sugar_content is None else str(item.sugar_content)
    return catalog.create_inline_food(item.name, sugar_text)


def _serialize_food(food: FoodItem) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "sugar_content": food.sugar_content,
        "is_healthy": food.is_healthy,
    }


def _serialize_summary(summary: SugarSummary) -> dict[str, object]:
    return {
        "total": summary.total,
        "limit": summary.limit,
        "percentage": summary.percentage,
        "status": summary.status.value,
    }


def _serialize_check(food: FoodItem, check: AdditionCheck) -> dict[str, object]:
    return {
        "food": _serialize_food(food),
        "projected_total": check.projected_total,
        "would_exceed": check.would_exceed,
        "warn": check.warn,
    }


def _serialize_entry(container: AppContainer, entry: SugarEntry) -> dict[str, object]:
    summary = container.limit_service.summarize(entry.total_sugar)
    return {
        "id": entry.id,
        "date": entry.date.isoformat(),
        "foods": [_serialize_food(food) for food in entry.foods],
        "total_sugar": entry.total_sugar,
        "summary": _serialize_summary(summary),
    }


def _serialize_plan(container: AppContainer, plan: MealPlan) -> dict[str, object]:
    summary = container.limit_service.summarize(plan.total_sugar)
    return {
        "id": plan.id,
        "name": plan.name,
        "date": plan.date.isoformat(),
        "foods": [_serialize_food(food) for food in plan.foods],
        "total_sugar": plan.total_sugar,
        "summary": _serialize_summary(summary),
    }
