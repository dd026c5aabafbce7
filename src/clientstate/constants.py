APP_NAME = "clientstate"
