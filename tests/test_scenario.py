import json
import unittest

import httpx

from mcdm import DecisionGrid, RankingClient, Submitter, render_result
from models import RunConfig


class TestEditorScenario(unittest.IsolatedAsyncioTestCase):
    async def test_submit_and_render_worked_example(self) -> None:
        bodies: list = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(
                200,
                json={"weights_used": [0.5, 0.5], "topsis_ranking": [2, 0, 1], "mairca_ranking": [0, 2, 1]},
            )

        grid = DecisionGrid.default()
        for index, name in enumerate(["Alt1", "Alt2", "Alt3"]):
            grid.rename_alternative(index, name)
        grid.rename_criterion(0, "Ra")
        grid.rename_criterion(1, "MRS")
        submitter = Submitter(RankingClient("http://ranking.test", transport=httpx.MockTransport(handler)))

        await submitter.submit(grid, RunConfig(method="all", use_automatic_weights=True))

        self.assertEqual(
            bodies,
            [
                {
                    "decision_matrix": [[2.041, 0.7306], [2.928, 1.3441], [7.704, 3.8894]],
                    "criteria_types": ["min", "max"],
                    "method": "all",
                    "use_merec_weights": True,
                }
            ],
        )
        rendered = render_result(submitter.result, grid)
        self.assertEqual(rendered.rankings["TOPSIS"], ["Alt3", "Alt1", "Alt2"])
        self.assertEqual(rendered.rankings["MAIRCA"], ["Alt1", "Alt3", "Alt2"])
        self.assertEqual(rendered.weights, [("Ra", "0.5000"), ("MRS", "0.5000")])
