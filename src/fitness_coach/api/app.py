"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Body, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from fitness_coach.app_logging import configure_logging
from fitness_coach.config import parse_allowed_origins
from fitness_coach.containers import AppContainer
from fitness_coach.domain.coach import CoachQuery
from fitness_coach.domain.errors import CoachError
from fitness_coach.domain.profile import ProfileForm
from fitness_coach.services.metrics import calculate_metrics, profile_from_form


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    allowed_origins = parse_allowed_origins(container.settings.cors_allowed_origins)
    if allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/metrics")
    async def metrics(form: ProfileForm) -> dict[str, object]:
        """Calculate calorie and macro targets for a profile."""
        return calculate_metrics(profile_from_form(form)).to_dict()

    @app.post("/api/workout")
    async def workout(query: CoachQuery, request: Request) -> JSONResponse:
        """Answer a fitness question through the generator."""
        state_container: AppContainer = request.app.state.container
        try:
            answer = await state_container.coach_service.answer(query)
        except CoachError as exc:
            logger.warning(
                "Coach request failed",
                extra={"status": exc.status_code, "error": exc.message},
            )
            return JSONResponse(status_code=exc.status_code, content=exc.to_payload())
        except Exception as exc:
            logger.exception("Workout API error")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": "Internal server error",
                    "details": str(exc) or "Unknown error occurred",
                },
            )
        return JSONResponse(content={"response": answer})

    @app.post("/api/test")
    async def canned(query: CoachQuery, request: Request) -> dict[str, str]:
        """Answer from the offline canned responder."""
        state_container: AppContainer = request.app.state.container
        return {"response": state_container.canned_responder.answer(query.user_input)}

    @app.get("/api/profile")
    async def get_profile(request: Request) -> dict[str, object]:
        """Return the saved profile."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.load()
        if profile is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return profile.model_dump(mode="json", by_alias=True)

    @app.put("/api/profile")
    async def put_profile(form: ProfileForm, request: Request) -> dict[str, object]:
        """Save the profile, replacing any existing one."""
        state_container: AppContainer = request.app.state.container
        saved = state_container.profile_service.save(form)
        return saved.model_dump(mode="json", by_alias=True)

    @app.patch("/api/profile")
    async def patch_profile(
        request: Request, changes: dict[str, object] = Body(...)
    ) -> dict[str, object]:
        """Merge changes into the saved profile."""
        state_container: AppContainer = request.app.state.container
        try:
            updated = state_container.profile_service.update(changes)
        except ValidationError as exc:
            raise HTTPException(
                status_code=422,
                detail=exc.errors(
                    include_url=False, include_context=False, include_input=False
                ),
            ) from exc
        if updated is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return updated.model_dump(mode="json", by_alias=True)

    @app.delete("/api/profile")
    async def delete_profile(request: Request) -> dict[str, str]:
        """Forget the saved profile."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.clear()
        return {"status": "ok"}

    return app
