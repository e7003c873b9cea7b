from fastapi import APIRouter, Depends

from fleet_admin.dependencies import get_fleet_store, get_lang, read_records, require_admin
from fleet_admin.services.content_store import ContentStore

router = APIRouter(prefix="/fleet")


@router.get("", summary="List fleet vehicles for a language")
def list_fleet(lang: str = Depends(get_lang), store: ContentStore = Depends(get_fleet_store)):
    return store.list(lang)


@router.put("", summary="Replace the fleet list for a language (Admin)", dependencies=[Depends(require_admin)])
def replace_fleet(
    body:  list         = Depends(read_records),
    lang:  str          = Depends(get_lang),
    store: ContentStore = Depends(get_fleet_store),
):
    return store.replace(lang, body)


@router.post("/reset", summary="Restore the default fleet list for a language (Admin)",
             dependencies=[Depends(require_admin)])
def reset_fleet(lang: str = Depends(get_lang), store: ContentStore = Depends(get_fleet_store)):
    return store.reset(lang)
