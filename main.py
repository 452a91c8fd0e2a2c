# main.py

from tictactoe_engine.cli import main


if __name__ == "__main__":
    main()
