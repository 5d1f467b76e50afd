"""FastAPI app: read-only JSON queries over one loaded feature matrix."""

from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from glmatrix import Matrix, MatrixParseError, load_matrix

app = FastAPI(
    title="glmatrix API",
    description="Graphics API feature matrix query backend",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://127.0.0.1:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_matrix: Matrix | None = None


def get_matrix() -> Matrix:
    """Load the configured document once; the resolved matrix is then only read."""
    global _matrix
    if _matrix is None:
        try:
            _matrix = load_matrix()
        except (MatrixParseError, OSError) as e:
            raise HTTPException(status_code=503, detail=f"Feature matrix unavailable: {e}") from e
    return _matrix


@app.get("/api/versions")
def get_versions(matrix: Matrix = Depends(get_matrix)) -> dict:
    """List API versions in document order."""
    return {
        "versions": [
            {
                "name": v.name,
                "version": v.version,
                "shader_name": v.shader_name,
                "shader_version": v.shader_version,
            }
            for v in matrix.versions
        ]
    }


@app.get("/api/version")
def get_version(
    name: str = Query(..., min_length=1),
    version: str = Query(..., min_length=1),
    matrix: Matrix = Depends(get_matrix),
) -> dict:
    """Return one version with its extensions and driver support."""
    api_version = matrix.find_version_by_name(name, version)
    if api_version is None:
        raise HTTPException(status_code=404, detail=f"Version not found: {name} {version}")
    return api_version.to_dict()


@app.get("/api/extensions/search")
def search_extension(
    q: str = Query(..., min_length=1),
    matrix: Matrix = Depends(get_matrix),
) -> dict:
    """Return the first extension whose name contains ``q``."""
    ext = matrix.find_extension_by_substring(q)
    if ext is None:
        raise HTTPException(status_code=404, detail=f"No extension matching: {q}")
    return ext.to_dict()


@app.get("/api/gles/{version}/drivers")
def get_gles_drivers(version: str, matrix: Matrix = Depends(get_matrix)) -> dict:
    """Return the driver support map of an OpenGL ES version."""
    drivers = matrix.drivers_supporting_gles_version(version)
    if drivers is None:
        raise HTTPException(status_code=404, detail=f"OpenGL ES version not found: {version}")
    return {"version": version, "drivers": drivers}
