#!/usr/bin/env python3
"""
Unit tests for weight configuration endpoints and WeightsService.
"""

import unittest

import pytest

from core.config_loader import DEFAULT_WEIGHTS, WEIGHT_PRESETS


@pytest.mark.web
class TestWeightsEndpoints(unittest.TestCase):

    def setUp(self):
        from fastapi import FastAPI
        from fastapi.testclient import TestClient
        from web.backend.routers import weights_router
        from web.backend.exceptions import ServiceException, service_exception_handler

        self.app = FastAPI()
        self.app.add_exception_handler(ServiceException, service_exception_handler)
        self.app.include_router(weights_router)
        self.client = TestClient(self.app, raise_server_exceptions=False)

    def test_get_defaults(self):
        response = self.client.get("/api/v1/weights")
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["style"], 0.30)
        self.assertEqual(data["preferences"], 0.25)
        self.assertAlmostEqual(data["total"], 1.0)

    def test_update(self):
        payload = {"style": 0.25, "goals": 0.25, "experience": 0.25, "preferences": 0.25}
        response = self.client.put("/api/v1/weights", json=payload)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get("/api/v1/weights").json()["goals"], 0.25)

    def test_update_rejects_bad_sum(self):
        payload = {"style": 0.5, "goals": 0.5, "experience": 0.5, "preferences": 0.5}
        response = self.client.put("/api/v1/weights", json=payload)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["type"], "InvalidWeightsException")
        self.assertEqual(self.client.get("/api/v1/weights").json()["style"], 0.30)

    def test_update_rejects_negative(self):
        payload = {"style": -0.25, "goals": 0.75, "experience": 0.25, "preferences": 0.25}
        response = self.client.put("/api/v1/weights", json=payload)
        self.assertEqual(response.status_code, 400)

    def test_apply_preset(self):
        response = self.client.post("/api/v1/weights/preset/Goal_Focused")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["goals"], 0.45)

    def test_unknown_preset(self):
        response = self.client.post("/api/v1/weights/preset/cardio_only")
        self.assertEqual(response.status_code, 404)
        self.assertFalse(response.json()["success"])

    def test_list_presets(self):
        response = self.client.get("/api/v1/weights/presets")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(set(response.json()["presets"]), set(WEIGHT_PRESETS))


class TestWeightsService(unittest.TestCase):

    def setUp(self):
        from web.backend.services.weights_service import WeightsService
        self.service = WeightsService(initial=DEFAULT_WEIGHTS)

    def test_snapshot_is_unaffected_by_update(self):
        snapshot = self.service.get_current_weights()
        self.service.update_weights(0.1, 0.2, 0.3, 0.4)
        self.assertEqual(snapshot, DEFAULT_WEIGHTS)
        self.assertEqual(self.service.get_current_weights().preferences, 0.4)

    def test_tolerance(self):
        weights = self.service.update_weights(0.3, 0.3, 0.15, 0.255)
        self.assertEqual(weights.preferences, 0.255)

    def test_reset(self):
        self.service.apply_preset("style_focused")
        self.service.reset()
        self.assertEqual(self.service.get_current_weights(), DEFAULT_WEIGHTS)


if __name__ == '__main__':
    unittest.main()
