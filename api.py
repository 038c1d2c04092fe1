import logging

from restaurant_api import create_app

app = create_app()

if __name__ == '__main__':
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.run(debug=True)
