"""
Purpose: Build the immutable SessionConfig from environment variables.
One place for credential validation and model allow-list resolution, so the
session loop never reads os.environ itself.

Testing: Pass a plain dict as the environment.
"""

from __future__ import annotations
import os
from typing import Mapping, Optional

from .errors import MissingCredentialError
from .models import DEFAULT_BASE_URL, SessionConfig, SupportedModel

API_KEY_ENV = "GROQ_API_KEY"
MODEL_ENV = "GROQ_MODEL"
BASE_URL_ENV = "GROQ_BASE_URL"


def load_session_config(
    environ: Optional[Mapping[str, str]] = None, *, verbose: bool = False
) -> SessionConfig:
    """Read credential, model and endpoint; raise if the credential is missing."""
    env = os.environ if environ is None else environ

    api_key = (env.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise MissingCredentialError(API_KEY_ENV)

    return SessionConfig(
        api_key=api_key,
        model=SupportedModel.resolve(env.get(MODEL_ENV)),
        base_url=env.get(BASE_URL_ENV) or DEFAULT_BASE_URL,
        verbose=verbose,
    )
