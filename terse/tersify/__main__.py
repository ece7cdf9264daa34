from tersify.cli import app

app(prog_name="tersify")
