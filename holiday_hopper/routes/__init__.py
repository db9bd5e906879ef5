# holiday_hopper/routes/__init__.py
NAMESPACE = "/explore/ws"
