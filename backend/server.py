import logging
import os
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, File, Form, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError

from publish_core.config_manager import ConfigManager
from publish_core.distribution.schedule import parse_schedule
from publish_core.errors import InvalidSchedule, MediaSourceError
from publish_core.ingestion.fetcher import MediaFetcher
from publish_core.ingestion.models import UploadRequest
from publish_core.pipeline import PipelineManager, prepare_upload
from publish_core.utils.logger import setup_logger_from_config

load_dotenv()


# Bridge standard logging (uvicorn) to loguru
class InterceptHandler(logging.Handler):
    def emit(self, record):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
logging.getLogger("uvicorn").handlers = [InterceptHandler()]
logging.getLogger("uvicorn.access").handlers = [InterceptHandler()]


@lru_cache(maxsize=1)
def get_config_manager() -> ConfigManager:
    return ConfigManager(os.getenv("AUTOPUBLISH_CONFIG", "config/settings.yaml"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    # File sinks live under the configured log_dir
    setup_logger_from_config(get_config_manager())
    yield


app = FastAPI(title="Autopublish Backend", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class PreviewRequest(UploadRequest):
    source_label: str = ""


def get_pipeline(config: ConfigManager = Depends(get_config_manager)) -> PipelineManager:
    return PipelineManager(config)


def get_fetcher(config: ConfigManager = Depends(get_config_manager)) -> MediaFetcher:
    return MediaFetcher(config)


def failure(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"success": False, "message": message}, status_code=status_code)


def validation_message(error: ValidationError) -> str:
    return ", ".join(issue["msg"] for issue in error.errors())


@app.post("/process")
def process_upload(
    category: str = Form("tech"),
    language: str = Form("en"),
    monetization: str = Form("enabled"),
    schedule_time: Optional[str] = Form(None, alias="scheduleTime"),
    video_file: Optional[UploadFile] = File(None, alias="videoFile"),
    video_url: Optional[str] = Form(None, alias="videoUrl"),
    pipeline: PipelineManager = Depends(get_pipeline),
    fetcher: MediaFetcher = Depends(get_fetcher),
):
    try:
        request = UploadRequest(
            category=category,
            language=language,
            monetization=monetization,
            schedule_time=schedule_time,
        )
    except ValidationError as e:
        return failure(validation_message(e), 400)

    # Reject a bad schedule before pulling any video bytes
    try:
        parse_schedule(request.schedule_time)
    except InvalidSchedule as e:
        return failure(str(e), 400)

    has_file = video_file is not None and bool(video_file.filename)
    try:
        if has_file and video_url:
            raise MediaSourceError("Provide only one video source: upload OR URL.")
        if has_file:
            media = fetcher.from_upload(video_file.filename, video_file.file)
        else:
            media = fetcher.resolve(url=video_url)
    except MediaSourceError as e:
        return failure(str(e), 400)

    try:
        summary = pipeline.run(media, request)
    except (InvalidSchedule, MediaSourceError) as e:
        return failure(str(e), 400)
    except Exception as e:
        logger.exception(f"Upload error: {e}")
        return failure(str(e) or "Unexpected server error.", 500)
    finally:
        media.close()

    return {"success": True, "summary": summary.model_dump(mode="json", by_alias=True)}


@app.post("/preview")
def preview(request: PreviewRequest):
    try:
        prepared = prepare_upload(request.source_label, request)
    except InvalidSchedule as e:
        return failure(str(e), 400)
    return {
        "success": True,
        "summary": prepared.summary().model_dump(mode="json", by_alias=True),
        "directive": prepared.directive.model_dump(mode="json"),
        "classificationCode": prepared.classification_code,
    }


@app.get("/health")
async def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    server_cfg = get_config_manager().server
    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)
