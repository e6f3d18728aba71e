import os
from judgment_search.api.server import app

PORT = int(os.environ.get("PORT", "3000"))

if __name__ == "__main__":
    # Check for production mode
    if os.environ.get("APP_ENV") == "production":
        from waitress import serve
        print(f"Starting production server with Waitress on port {PORT}...")
        serve(app, host="0.0.0.0", port=PORT)
    else:
        print("Starting development server...")
        app.run(debug=True, port=PORT, host="0.0.0.0")
