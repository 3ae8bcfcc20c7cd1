# abquiz/main.py
import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .config import configure_logging
from .errors import ScoringError
from .llm_helper import AzureOpenAIGenerator, TextGenerator
from .models import DEFAULT_CHARACTERISTIC_PAIRS, AnalyzeRequest, ScoreMap
from .runner import score

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    yield


app = FastAPI(title='A/B Quiz Scorer', lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_methods=['*'],
    allow_headers=['*']
)


def get_generator() -> TextGenerator:
    return AzureOpenAIGenerator()


@app.get('/')
async def root():
    """Root endpoint - API information"""
    return {
        'service': 'A/B Quiz Scorer',
        'status': 'running',
        'version': '1.0.0',
        'endpoints': {
            'health': '/health',
            'analyze': 'POST /api/analyze',
            'docs': '/docs'
        }
    }


@app.post('/api/analyze')
async def analyze(req: AnalyzeRequest, generator: TextGenerator = Depends(get_generator)) -> ScoreMap:
    """
    Score the submitted answers on each characteristic pair. Omitting
    `characteristics` uses the default pair list.
    """
    characteristics = req.characteristics
    if characteristics is None:
        characteristics = DEFAULT_CHARACTERISTIC_PAIRS

    try:
        return await score(req.questions, req.answers, characteristics, generator)
    except ScoringError as e:
        logger.warning(f"Analysis unavailable ({e.kind}): {e}")
        raise HTTPException(
            status_code=e.status_code,
            detail={'error': e.kind, 'message': str(e)}
        ) from e


@app.get('/health')
async def health_check():
    """Health check endpoint."""
    return {'status': 'healthy'}


if __name__ == '__main__':
    import uvicorn
    uvicorn.run('abquiz.main:app', host='0.0.0.0', port=8000, reload=True)
