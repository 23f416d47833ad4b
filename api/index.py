# created: 10/16/2026
# last updated: 10/16/2026
# serverless entry point: the platform imports `app` from this file

from skincoach.app import app

if __name__ == "__main__":
    # Dev server on http://localhost:5000
    app.run(host="0.0.0.0", port=5000, debug=True)
