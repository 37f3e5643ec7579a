# parse wiex options
# load config / init logger
# resolve and invoke the command
from wiex.cli import run

if __name__ == "__main__":
    run()
