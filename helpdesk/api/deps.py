from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from helpdesk.core.config import Settings
from helpdesk.services.storage import AttachmentStorage


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> AttachmentStorage:
    return request.app.state.storage


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
StorageDep = Annotated[AttachmentStorage, Depends(get_storage)]
