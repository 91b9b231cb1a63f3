"""
Hotel search pipeline package.

Normalizes raw hotel payloads from upstream providers (Elong, Agoda) into
bilingual records and derives the search-index fields for them. The pipeline
is imported lazily so that importing a submodule does not build the geography
catalog or load the segmentation dictionary.
"""


def get_pipeline():
    """Lazy import wrapper returning the shared HotelPipeline."""
    from .services.pipeline import get_pipeline as _get_pipeline
    return _get_pipeline()


__all__ = ["get_pipeline"]
