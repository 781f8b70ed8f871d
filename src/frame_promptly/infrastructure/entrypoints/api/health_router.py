from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health_check():
    try:
        app_version = version("frame-promptly")
    except PackageNotFoundError:
        app_version = "0.0.0"

    return {
        "status": "ok",
        "service": "frame-promptly",
        "version": app_version,
    }
