from jsscribe.cli import app

app()
