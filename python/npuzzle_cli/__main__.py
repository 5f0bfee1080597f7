from npuzzle_cli.main import app

app(prog_name="npuzzle")
