from slidehint.cli.app import app

__all__ = ["app"]
