from textcrypt.cli import app

app(prog_name="textcrypt")
