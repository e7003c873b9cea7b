from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from fleet_admin.config import Settings
from fleet_admin.dependencies import get_settings
from fleet_admin.utils.exceptions import NotFoundException

router = APIRouter()


@router.get("/", include_in_schema=False)
def index(settings: Settings = Depends(get_settings)):
    path = settings.SITE_DIR / settings.INDEX_FILE
    if not path.is_file():
        raise NotFoundException("Page")
    return FileResponse(path)
