import asyncio
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from brewmind.config import get_settings
from brewmind.services.gemini_client import GeminiClient
from brewmind.services.model_catalog import list_generation_models


# List available models
async def list_models():
    settings = get_settings()
    if not settings.google_api_key:
        raise ValueError("GOOGLE_API_KEY not found. Make sure it's set in your .env file.")
    async with GeminiClient(settings) as client:
        models = await list_generation_models(client)
    print("Available models:")
    for name in models:
        print(name)
    return models


if __name__ == "__main__":
    asyncio.run(list_models())
