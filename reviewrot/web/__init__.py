"""HTTP API for ReviewRot."""


def __getattr__(name: str):
    # Avoid building the FastAPI app (and loading settings) at package import time.
    if name == "create_app":
        from reviewrot.web.app import create_app

        globals()["create_app"] = create_app
        return create_app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["create_app"]
