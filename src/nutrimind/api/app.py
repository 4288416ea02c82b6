"""FastAPI application factory."""

import base64
import binascii
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, status

from nutrimind.api.schemas import (
    ChefOut,
    ChefRequest,
    DashboardOut,
    DayOut,
    EffectiveGoalsOut,
    EntryCreate,
    EntryOut,
    GoalsOut,
    GoalsUpdate,
    InventoryItemIn,
    InventoryItemOut,
    MacrosModel,
    NutrientsModel,
    WeekOut,
    WeekOverviewOut,
)
from nutrimind.app_logging import configure_logging
from nutrimind.containers import AppContainer
from nutrimind.errors import (
    EntryNotFoundError,
    InventoryItemNotFoundError,
    MealAnalysisError,
    RecipeGenerationError,
)
from nutrimind.services.totals import (
    aggregate,
    calorie_balance,
    goal_progress,
    group_by_slot,
)
from nutrimind.services.weekly import summarize_week


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Session timezone: %s", app.state.container.session.timezone_name)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/entries")
    async def list_entries(request: Request) -> list[EntryOut]:
        """Return today's log entries."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.session.today_entries()
        return [EntryOut.from_entry(entry) for entry in entries]

    @app.post("/entries", status_code=status.HTTP_201_CREATED)
    async def create_entry(payload: EntryCreate, request: Request) -> EntryOut:
        """Analyze a meal description and photos and log the result."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session
        images = [_decode_image(image) for image in payload.images]
        try:
            entry = await state_container.analysis_service.analyze(
                payload.text, images, payload.tags, session.now()
            )
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        except MealAnalysisError as exc:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
            ) from exc
        session.add_entry(entry)
        return EntryOut.from_entry(entry)

    @app.delete("/entries/{entry_id}")
    async def delete_entry(entry_id: UUID, request: Request) -> dict[str, str]:
        """Remove a log entry."""
        state_container: AppContainer = request.app.state.container
        try:
            state_container.session.delete_entry(entry_id)
        except EntryNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        return {"status": "ok"}

    @app.get("/goals")
    async def get_goals(request: Request) -> GoalsOut:
        """Return the base goal profile."""
        state_container: AppContainer = request.app.state.container
        return GoalsOut.from_goals(state_container.session.goals)

    @app.put("/goals")
    async def update_goals(payload: GoalsUpdate, request: Request) -> GoalsOut:
        """Edit the goal profile."""
        state_container: AppContainer = request.app.state.container
        goals = state_container.session.update_goals(
            goal_type=payload.type,
            targets=payload.targets.to_profile() if payload.targets else None,
            is_training_day=payload.is_training_day,
            steps=payload.steps,
            water_ml=payload.water_ml,
        )
        return GoalsOut.from_goals(goals)

    @app.get("/goals/effective")
    async def get_effective_goals(request: Request) -> EffectiveGoalsOut:
        """Return targets after training-day and step modifiers."""
        state_container: AppContainer = request.app.state.container
        return EffectiveGoalsOut.from_goals(state_container.session.effective_goals)

    @app.get("/dashboard")
    async def dashboard(request: Request) -> DashboardOut:
        """Return today's totals and what is left to eat."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session
        goals = session.effective_goals
        totals = session.totals()
        meals = {
            slot: NutrientsModel.from_profile(aggregate(entries))
            for slot, entries in group_by_slot(session.today_entries()).items()
        }
        return DashboardOut(
            goals=EffectiveGoalsOut.from_goals(goals),
            totals=NutrientsModel.from_profile(totals),
            meals=meals,
            remaining=MacrosModel.from_profile(session.remaining()),
            progress=goal_progress(totals, goals.targets),
            calories_left=calorie_balance(totals, goals.targets),
            next_meal=session.next_meal(),
        )

    @app.get("/week")
    async def week(request: Request) -> WeekOut:
        """Return the Monday..Sunday log for the current week."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session
        days = session.week()
        overview = summarize_week(days, session.effective_goals)
        return WeekOut(
            days=[DayOut.from_summary(day) for day in days],
            overview=WeekOverviewOut.from_overview(overview),
        )

    @app.get("/inventory")
    async def list_inventory(request: Request) -> list[InventoryItemOut]:
        """Return the kitchen inventory."""
        state_container: AppContainer = request.app.state.container
        return [
            InventoryItemOut.from_item(item)
            for item in state_container.session.inventory
        ]

    @app.post("/inventory", status_code=status.HTTP_201_CREATED)
    async def add_inventory_item(
        payload: InventoryItemIn, request: Request
    ) -> InventoryItemOut:
        """Add an item to the kitchen inventory."""
        state_container: AppContainer = request.app.state.container
        item = state_container.session.add_inventory_item(
            payload.name, payload.quantity
        )
        return InventoryItemOut.from_item(item)

    @app.delete("/inventory/{item_id}")
    async def remove_inventory_item(item_id: UUID, request: Request) -> dict[str, str]:
        """Remove an item from the kitchen inventory."""
        state_container: AppContainer = request.app.state.container
        try:
            state_container.session.remove_inventory_item(item_id)
        except InventoryItemNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        return {"status": "ok"}

    @app.post("/coach")
    async def coach(request: Request) -> dict[str, str]:
        """Return real-time advice on today's intake."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session
        advice = await state_container.coach_service.advise(
            session.today_entries(), session.effective_goals
        )
        return {"advice": advice}

    @app.post("/chef")
    async def chef(payload: ChefRequest, request: Request) -> ChefOut:
        """Suggest a recipe for the next meal that fills the remaining macros."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session
        hour = session.now().hour
        try:
            recipe = await state_container.chef_service.complete_day(
                session.today_entries(),
                session.effective_goals,
                session.inventory,
                hour,
                payload.craving,
            )
        except RecipeGenerationError as exc:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
            ) from exc
        return ChefOut(
            meal=session.next_meal(hour),
            remaining=MacrosModel.from_profile(session.remaining()),
            recipe=recipe,
        )

    return app


def _decode_image(value: str) -> bytes:
    """Decode a base64 image, accepting data URLs."""
    encoded = value.split(",", 1)[1] if value.startswith("data:") else value
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Images must be base64 encoded",
        ) from exc
