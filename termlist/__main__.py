from termlist.cli.main import run

run()
