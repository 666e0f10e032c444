"""FastAPI front end for the study assistant.

Endpoints:
- GET /health
- POST /explain     { "doubt": "..." }
- POST /summarize   { "text": "..." }
- POST /quiz        { "source_text": "...", "question_count": 5 }
- POST /quiz/score  { "questions": [...], "answers": {"0": "..."} }
"""
from __future__ import annotations
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request

from study_assistant.common.config import load_settings
from study_assistant.common.logging_setup import setup_logging
from study_assistant.common.schema import (
    ExplainIn,
    ExplainOut,
    QuizIn,
    QuizOut,
    ScoreIn,
    ScoreOut,
    SummarizeIn,
    SummarizeOut,
)
from study_assistant.gateway.errors import GatewayError
from study_assistant.gateway.gemini_gateway import AIGateway
from study_assistant.views.diagram import extract_diagram
from study_assistant.views.scoring import grade_quiz

LOGGER = logging.getLogger("study_assistant.serve.app")
setup_logging()


def _gateway(request: Request) -> AIGateway:
    return request.app.state.gateway


def _to_http(e: GatewayError) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=e.message)


def create_app(gateway: AIGateway | None = None) -> FastAPI:
    """
    Build the app. Without an injected gateway one is created from settings
    at startup, failing before any request if the credential is missing.
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app.state.gateway is None:
            settings = load_settings()
            app.state.gateway = AIGateway.from_settings(settings)
            LOGGER.info("Gateway ready for model %s", settings.model_id)
        yield

    app = FastAPI(title="Study Assistant", lifespan=lifespan)
    app.state.gateway = gateway

    @app.get("/health")
    def health(request: Request) -> dict[str, str]:
        gw = request.app.state.gateway
        return {"status": "ok", "model": gw.model_id if gw else "unconfigured"}

    @app.post("/explain", response_model=ExplainOut)
    async def explain(body: ExplainIn, request: Request) -> ExplainOut:
        try:
            prose = await _gateway(request).explain(body.doubt)
        except GatewayError as e:
            raise _to_http(e) from e
        result = extract_diagram(prose)
        return ExplainOut(explanation=result.text, diagram=result.diagram)

    @app.post("/summarize", response_model=SummarizeOut)
    async def summarize(body: SummarizeIn, request: Request) -> SummarizeOut:
        try:
            summary = await _gateway(request).summarize(body.text)
        except GatewayError as e:
            raise _to_http(e) from e
        return SummarizeOut(summary=summary)

    @app.post("/quiz", response_model=QuizOut)
    async def quiz(body: QuizIn, request: Request) -> QuizOut:
        try:
            questions = await _gateway(request).generate_quiz(body.source_text, body.question_count)
        except GatewayError as e:
            raise _to_http(e) from e
        return QuizOut(questions=questions)

    @app.post("/quiz/score", response_model=ScoreOut)
    def score(body: ScoreIn) -> ScoreOut:
        return grade_quiz(body.questions, body.answers)

    return app


app = create_app()
