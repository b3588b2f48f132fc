from brdocs.cli import run

run()
