from usuarios_api.main import run

run()
