from fastapi import APIRouter, Depends

from fleet_admin.dependencies import get_gallery_store, get_lang, read_records, require_admin
from fleet_admin.services.content_store import ContentStore

router = APIRouter(prefix="/gallery")


@router.get("", summary="List gallery items for a language")
def list_gallery(lang: str = Depends(get_lang), store: ContentStore = Depends(get_gallery_store)):
    return store.list(lang)


@router.put("", summary="Replace the gallery for a language (Admin)", dependencies=[Depends(require_admin)])
def replace_gallery(
    body:  list         = Depends(read_records),
    lang:  str          = Depends(get_lang),
    store: ContentStore = Depends(get_gallery_store),
):
    return store.replace(lang, body)


@router.post("/reset", summary="Restore the default gallery for a language (Admin)",
             dependencies=[Depends(require_admin)])
def reset_gallery(lang: str = Depends(get_lang), store: ContentStore = Depends(get_gallery_store)):
    return store.reset(lang)
