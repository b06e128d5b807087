APP_NAME = "sitemanager"
ENV_PREFIX = "SITEMANAGER_CONFIG__"
