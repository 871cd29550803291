from slidepuzzle.main import app

app(prog_name="slidepuzzle")
