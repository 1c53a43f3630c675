from fastapi import APIRouter, BackgroundTasks, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from typing import Optional

from pydantic import BaseModel

from imagery_ui.controller import SubmissionController
from imagery_ui.ui.pages import page_response
from imagery_ui.ui.renderer import TITLE, render_page

REFRESH_SECONDS = 2

router = APIRouter()


class StateResponse(BaseModel):
    phase: str
    can_submit: bool
    input_url: str
    persist: bool
    error: Optional[str] = None
    has_result: bool


def get_controller(request: Request) -> SubmissionController:
    return request.app.state.controller


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, controller: SubmissionController = Depends(get_controller)):
    state = controller.state
    refresh = REFRESH_SECONDS if state.in_flight else 0
    return page_response(request, render_page(state), TITLE, refresh_seconds=refresh)


@router.post("/submit")
async def submit(
    background_tasks: BackgroundTasks,
    youtube_url: str = Form(""),
    save: bool = Form(False),
    controller: SubmissionController = Depends(get_controller),
) -> RedirectResponse:
    if not controller.can_submit:
        # The button is disabled while a call is pending; a replayed form post lands here.
        return RedirectResponse("/", status_code=303)

    controller.set_url(youtube_url)
    controller.set_persist(save)
    pending = controller.begin_submit()
    if pending is not None:
        background_tasks.add_task(_await_pending, pending)

    return RedirectResponse("/", status_code=303)


async def _await_pending(pending) -> None:
    await pending


@router.get("/api/state", response_model=StateResponse)
async def get_state(controller: SubmissionController = Depends(get_controller)) -> StateResponse:
    state = controller.state
    return StateResponse(
        phase=state.phase.value,
        can_submit=controller.can_submit,
        input_url=state.input_url,
        persist=state.persist_to_disk,
        error=state.error_message,
        has_result=state.result is not None,
    )


@router.get("/api/result")
async def get_result(controller: SubmissionController = Depends(get_controller)) -> Response:
    text = controller.result_text()
    if text is None:
        raise HTTPException(status_code=404, detail="No result available")
    return Response(content=text, media_type="application/json")
