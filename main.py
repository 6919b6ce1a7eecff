import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, File, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

import config
from page import INDEX_HTML
from pipeline import TransformationController
from schemas import HealthResponse, TransformationState
from uploader import Uploader, guess_mime_type, is_image_type

config.configure_logging()
logger = logging.getLogger(__name__)


def create_app(controller: Optional[TransformationController] = None) -> FastAPI:
    app = FastAPI(
        title="Image Transformer",
        description="Turns uploaded images into high-contrast black-on-white versions",
        version="1.0.0"
    )

    # Allow the page (and local tools) to call the API via fetch.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.controller = controller or TransformationController()
    app.state.uploader = Uploader(on_upload=app.state.controller.set_input)

    # ── Page ─────────────────────────────────────────────────────────

    @app.get("/", response_class=HTMLResponse)
    def index():
        return INDEX_HTML

    @app.get("/health", response_model=HealthResponse)
    def health():
        return {"ok": True}

    # ── State and events ─────────────────────────────────────────────

    @app.get("/state", response_model=TransformationState)
    def get_state(request: Request):
        return request.app.state.controller.state

    @app.post("/upload", response_model=TransformationState)
    async def upload(request: Request, file: UploadFile = File(...)):
        mime_type = guess_mime_type(file.filename, file.content_type)
        if not is_image_type(mime_type):
            raise HTTPException(status_code=415, detail=f"Not an image: {mime_type}")

        content = await file.read()
        request.app.state.uploader.upload(file.filename, content, mime_type)
        return request.app.state.controller.state

    @app.post("/transform", response_model=TransformationState)
    async def transform(request: Request):
        controller: TransformationController = request.app.state.controller
        if controller.loading:
            raise HTTPException(status_code=409, detail="A transformation is already running.")

        await controller.transform()
        return controller.state

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
