from bankpage.api.main import run

run()
