"""Consumidores do pipeline: páginas que o invocam no momento da requisição."""

from .index import (
    IndexPageProps,
    NOT_FOUND,
    PageDecision,
    REDIRECT,
    RENDER,
    configured_index_pipeline,
    get_server_side_props,
    index_pipeline,
    interpret_result,
    load_index_page,
)

__all__ = [
    "IndexPageProps",
    "NOT_FOUND",
    "PageDecision",
    "REDIRECT",
    "RENDER",
    "configured_index_pipeline",
    "get_server_side_props",
    "index_pipeline",
    "interpret_result",
    "load_index_page",
]
