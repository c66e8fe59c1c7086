"""Development entry point: ``python app.py`` (or ``flask --app app run``)."""

import os

from src.shop_attendance.shop_attendance.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "3000")), debug=bool(app.config.get("DEBUG")))
