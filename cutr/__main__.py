from cutr.cli import run

run()
