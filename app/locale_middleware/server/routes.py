from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

from locale_middleware.server.dependencies import I18nDep, LocaleDep

router = APIRouter()


class LocaleResponse(BaseModel):
    lang: str
    description: str


class LanguageResponse(BaseModel):
    name: str
    description: str
    default: bool


class MessageResponse(BaseModel):
    key: str
    lang: str
    message: str


@router.get("/", response_model=LocaleResponse)
def current_locale(locale: LocaleDep):
    """Language resolved for this request."""
    return LocaleResponse(lang=locale.lang, description=locale.description)


@router.get("/languages", response_model=List[LanguageResponse])
def list_languages(i18n: I18nDep):
    """Configured languages, in priority order."""
    return [
        LanguageResponse(
            name=lang.name,
            description=lang.description,
            default=lang.name == i18n.default,
        )
        for lang in i18n.languages
    ]


@router.get("/messages/{key}", response_model=MessageResponse)
def translate_message(key: str, locale: LocaleDep):
    return MessageResponse(key=key, lang=locale.lang, message=locale.translate(key))
