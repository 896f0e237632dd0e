"""Mini README: FastAPI surface for SnapClassify.

Structure:
    * create_application - application factory wiring the routes to a
      ``ClassificationService``.

Routes:
    * GET /health - readiness, backend name and label count.
    * GET /labels - the loaded label list.
    * POST /classify - multipart ``image`` upload returning display text.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse

from ..classification import decode_image
from ..logging_utils import get_logger
from ..service import ClassificationService

LOGGER = get_logger(__name__)


def create_application(service: Optional[ClassificationService] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    app = FastAPI(title="SnapClassify", version="0.1.0")
    if service is None:
        service = ClassificationService()
        service.setup()

    @app.get("/health")
    async def health() -> JSONResponse:
        return JSONResponse(
            {
                "ready": service.ready,
                "backend": service.settings.classifier_backend,
                "label_count": len(service.label_store),
            }
        )

    @app.get("/labels")
    async def labels() -> JSONResponse:
        """Return the labels in class index order."""

        return JSONResponse({"labels": list(service.label_store.labels)})

    @app.post("/classify")
    def classify(image: UploadFile = File(...)) -> JSONResponse:
        """Classify an uploaded image and return the formatted results.

        Declared without ``async`` so FastAPI runs inference in its threadpool.
        """

        data = image.file.read()
        LOGGER.info("Received image upload %s (%s bytes)", image.filename, len(data))
        try:
            decoded = decode_image(data)
        except ValueError as error:
            raise HTTPException(
                status_code=400, detail=f"Error loading image: {error}"
            ) from error
        return JSONResponse(
            {"filename": image.filename, "results": service.describe(decoded)}
        )

    return app
