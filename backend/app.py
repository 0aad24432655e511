from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from typing import Optional, Dict, Any
import os
import logging
from dotenv import load_dotenv

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from services.dfa_engine import DFAEngine, InvalidInputType, EvaluationLimitError
from translators.vis_network_translator import VisNetworkTranslator
from schemas.automaton import AutomatonGraph, EvaluateRequest, NormalizeRequest

# Load environment variables
load_dotenv()

max_input_length = int(os.getenv("DFA_MAX_INPUT_LENGTH", 10000))
max_transitions = int(os.getenv("DFA_MAX_TRANSITIONS", 2000))

# Initialize services
dfa_engine = DFAEngine(
    max_input_length=max_input_length,
    max_transitions=max_transitions,
)
vis_network_translator = VisNetworkTranslator()

logger.info(
    f"DFA engine limits: input length {max_input_length}, transitions {max_transitions}"
)

app = FastAPI(
    title="DFA Evaluator",
    version="1.0.0",
)

# Configure CORS - editor dev servers by default
default_origins = "http://localhost:5173,http://localhost:3000,http://localhost:8080"
allowed_origins = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", default_origins).split(",")
    if origin.strip()
]

logger.info(f"CORS enabled for origins: {allowed_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,
)

# Add validation error handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error for {request.url}: {exc}")
    return JSONResponse(status_code=422, content={"detail": f"Validation error: {exc.errors()}"})


def resolve_graph(graph: Optional[Dict[str, Any]], network: Optional[Dict[str, Any]]) -> Any:
    """Pick the automaton from a request: canonical graph first, editor network second."""
    if graph is not None:
        return graph
    if network is not None:
        return vis_network_translator.to_graph(network)
    raise InvalidInputType("Request must include either 'graph' or 'network'")


# ============================================================================
# DFA ENDPOINTS
# ============================================================================

@app.get("/")
async def root():
    return {"message": "DFA Evaluator API"}

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.post("/api/dfa/evaluate")
async def evaluate_dfa(request: EvaluateRequest):
    """Evaluate an input string against a drawn automaton"""
    try:
        source = "graph" if request.graph is not None else "network"
        logger.info(
            f"Evaluating input of {len(request.input_string)} symbols against {source}"
        )

        graph = resolve_graph(request.graph, request.network)
        verdict = dfa_engine.evaluate(request.input_string, graph)

        response = verdict.to_response()
        logger.info(f"Evaluation result: {response}")
        return response

    except InvalidInputType as e:
        logger.warning(f"Invalid automaton in evaluation request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except EvaluationLimitError as e:
        logger.warning(f"Evaluation request over limit: {e}")
        raise HTTPException(status_code=413, detail=str(e))
    except HTTPException:
        raise  # Re-raise HTTP exceptions
    except Exception as e:
        logger.error(f"Error evaluating automaton: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Evaluation failed: {str(e)}")

@app.post("/api/dfa/normalize")
async def normalize_dfa(request: NormalizeRequest):
    """Return the automaton with every edge expanded to single-character transitions"""
    try:
        graph = resolve_graph(request.graph, request.network)
        normalized: AutomatonGraph = dfa_engine.normalize(graph)

        logger.info(
            f"Normalized automaton: {len(normalized.states)} states, "
            f"{len(normalized.transitions)} transitions"
        )
        return vis_network_translator.translate(normalized)

    except InvalidInputType as e:
        logger.warning(f"Invalid automaton in normalize request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except EvaluationLimitError as e:
        logger.warning(f"Normalize request over limit: {e}")
        raise HTTPException(status_code=413, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error normalizing automaton: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Normalization failed: {str(e)}")


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
