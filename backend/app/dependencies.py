from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from mentor.config import ResolverConfig, load_resolver_config
from mentor.registry import build_resolver
from mentor.resolver import FeedbackResolver

from .credentials import ProfileCredentialStore
from .database import get_db


@lru_cache
def get_resolver_config() -> ResolverConfig:
    """Read the resolver configuration from the environment once per process."""
    return load_resolver_config()


def get_resolver(
    db: Session = Depends(get_db),
    config: ResolverConfig = Depends(get_resolver_config),
) -> FeedbackResolver:
    return build_resolver(config, credential_store=ProfileCredentialStore(db))
