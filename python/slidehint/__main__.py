from slidehint.cli.app import app

app(prog_name="slidehint")
