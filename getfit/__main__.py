"""
Entry point for running the API as a module: python -m getfit
"""
import uvicorn

if __name__ == "__main__":
    uvicorn.run("getfit.main:app", host="0.0.0.0", port=8000)
