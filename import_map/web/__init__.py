from import_map.web.app import create_app

__all__ = ["create_app"]
