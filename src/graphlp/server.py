from __future__ import annotations

import logging
import os
from typing import List

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from .schemas import SolveOptions
from .graph.parser import parse_constraint_line
from .graph.solver import solve
from .graph.geometry import convex_hull, iso_cost_intercepts
from .graph.diagnostics import advise, analyze_infeasibility
from .graph.reference import cross_check
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

app = FastMCP("Graphical LP")


@app.tool()
def solve_graphical_lp(
    c1: float,
    c2: float,
    constraints: List[str],
    options: SolveOptions | None = None,
) -> dict:
    """
    Minimise c1*x + c2*y subject to the constraint lines and x, y >= 0.

    Returns the solution (vertices sorted by objective value, best vertex,
    normalised constraint set), the feasible region's hull in counterclockwise
    order, the iso-cost line's axis intercepts and advisory flags.
    """
    solution = solve(c1, c2, constraints, options)
    result = {
        "solution": solution.model_dump(),
        "hull": [p.model_dump() for p in convex_hull(solution.vertices)],
        "advisory": advise(solution, options).model_dump(),
        "iso_cost": None,
    }
    if solution.best is not None:
        on_y_axis, on_x_axis = iso_cost_intercepts(c1, c2, solution.best.z)
        result["iso_cost"] = {
            "y_axis": on_y_axis.model_dump() if on_y_axis else None,
            "x_axis": on_x_axis.model_dump() if on_x_axis else None,
        }
    return result


@app.tool()
def parse_constraint_lines(constraints: List[str]) -> list:
    """Parse constraint lines into {a, b, op, rhs}, reporting why a line was rejected."""
    return [parse_constraint_line(line).model_dump() for line in constraints]


@app.tool()
def diagnose_infeasibility(c1: float, c2: float, constraints: List[str]) -> dict:
    """Return the constraint lines whose removal makes an infeasible model feasible."""
    return analyze_infeasibility(c1, c2, constraints)


@app.tool()
def cross_check_with_highs(c1: float, c2: float, constraints: List[str]) -> dict:
    """Solve with the vertex method and with SciPy HiGHS and return both optima."""
    solution = solve(c1, c2, constraints)
    reference = cross_check(solution)
    return {
        "vertex_method": solution.best.model_dump() if solution.best else None,
        "reference": reference.model_dump(),
    }


if __name__ == "__main__":
    import sys

    setup_logging(getattr(logging, os.environ.get("GRAPHLP_LOG_LEVEL", "INFO").upper(), logging.INFO))
    transport = os.environ.get("MCP_TRANSPORT", "stdio")
    logger.info(f"Starting Graphical LP server ({transport})")

    if transport == "stdio" or "--stdio" in sys.argv:
        app.run(transport="stdio")
    else:
        port = int(os.environ.get("PORT", "8081"))
        app.settings.host = "0.0.0.0"
        app.settings.port = port
        app.settings.streamable_http_path = "/mcp"
        app.settings.transport_security = TransportSecuritySettings(
            enable_dns_rebinding_protection=False,
            allowed_hosts=["*"],
            allowed_origins=["*"],
        )
        app.run(transport="streamable-http")
