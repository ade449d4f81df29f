# Serve the blue/green app from a source checkout: `python main.py`.

from bluegreen_app.server import main

if __name__ == "__main__":
    main()
