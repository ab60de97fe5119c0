EXAMPLE = {
    "bat_speed_mph": 72,
    "attack_angle_deg": 11,
    "trigger_to_impact_ms": 148,
    "speed_efficiency_pct": 88,
    "hand_cast_distance_in": 5,
    "distance_in_zone_in": 14,
}


# =============================================================================
# Health & benchmarks
# =============================================================================

def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["health"] == "/api/health"


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["engine_available"] is True


def test_benchmarks(client):
    response = client.get("/api/benchmarks/HS")
    assert response.status_code == 200
    body = response.json()
    assert body["bat_speed_percentiles"]["p50"] == 66
    assert body["timing_ideal_ms"] == 140
    assert body["timing_min_ms"] == 120
    assert body["timing_max_ms"] == 170


def test_benchmarks_unknown_age_group(client):
    assert client.get("/api/benchmarks/Masters").status_code == 422


# =============================================================================
# Swing analysis
# =============================================================================

def test_analyze_swing(client):
    response = client.post("/api/analysis/swing", json={"features": EXAMPLE, "age_group": "HS"})
    assert response.status_code == 200
    body = response.json()
    assert body["motor_profile"] == "WHIPPER"
    assert body["motor_profile_confidence"] == 70
    assert body["tempo_score"] == 87
    assert body["efficiency_rating"] == 87
    assert body["attack_angle_zone"] == "optimal"
    assert body["leak"] == "CLEAN_TRANSFER"
    assert body["four_b"]["composite"] == 66
    assert body["four_b"]["grade"] == "Plus"
    assert body["features"]["bat_speed_mph"] == 72


def test_analyze_swing_default_age_group(client):
    response = client.post("/api/analysis/swing", json={"features": {}})
    assert response.status_code == 200
    assert response.json()["age_group"] == "12U"


def test_analyze_swing_rejects_bad_types(client):
    response = client.post("/api/analysis/swing", json={"features": {"bat_speed_mph": "fast"}})
    assert response.status_code == 422


def test_analyze_swing_short_hand_cast(client):
    response = client.post("/api/analysis/swing", json={"features": {"hand_cast_distance_in": 2}})
    assert response.status_code == 200
    assert response.json()["efficiency_rating"] == 100


def test_analyze_session(client):
    response = client.post("/api/analysis/session", json={
        "age_group": "HS",
        "swings": [EXAMPLE, {"bat_speed_mph": 12}, EXAMPLE],
    })
    assert response.status_code == 200
    body = response.json()
    assert len(body["analyses"]) == 3
    summary = body["summary"]
    assert summary["total_swings"] == 3
    assert summary["valid_swings"] == 2
    assert summary["dominant_motor_profile"] == "WHIPPER"
    assert summary["motor_profile_breakdown"]["WHIPPER"] == 2


# =============================================================================
# Vision
# =============================================================================

def test_analyze_vision(client):
    response = client.post("/api/analysis/vision", json={
        "age_group": "HS",
        "payload": {"body": 58, "brain": 80, "bat": 55, "ball": 70, "leak_detected": "CAST"},
    })
    assert response.status_code == 200
    body = response.json()
    assert body["source_fidelity"] == "vision2d"
    assert body["four_b"]["composite"] == 55
    assert body["four_b"]["capped"] is True
    assert body["leak"] == "CAST"


def test_analyze_vision_text_payload(client):
    response = client.post("/api/analysis/vision", json={
        "payload": '```json\n{"body": 70, "motor_profile": "TITAN", "confidence": 0.8}\n```',
    })
    assert response.status_code == 200
    assert response.json()["motor_profile"] == "TITAN"
    assert response.json()["motor_profile_confidence"] == 80


def test_analyze_vision_negative_confidence(client):
    response = client.post("/api/analysis/vision", json={
        "payload": {"motor_profile": "WHIPPER", "confidence": -0.3},
    })
    assert response.status_code == 200
    assert response.json()["motor_profile_confidence"] == 0


def test_analyze_vision_rejects_garbage(client):
    response = client.post("/api/analysis/vision", json={"payload": "the swing looked great"})
    assert response.status_code == 422


def test_analyze_vision_session(client):
    response = client.post("/api/analysis/vision/session", json={
        "payloads": [
            {"body": 60, "brain": 80, "bat": 70, "ball": 80, "leak_detected": "CAST", "motor_profile": "WHIPPER"},
            {"body": 50, "brain": 50, "bat": 50, "ball": 50, "leak_detected": "CAST", "motor_profile": "WHIPPER"},
            {"body": 70, "brain": 40, "bat": 60, "ball": 30, "motor_profile": "SPINNER"},
        ],
    })
    assert response.status_code == 200
    summary = response.json()["summary"]
    assert summary["avg_composite"] == 54.3
    assert summary["leak_frequency"] == "CAST: 2/3 swings"
    assert summary["dominant_motor_profile"] == "WHIPPER"
    assert summary["profile_confidence"] == 0.67


def test_analyze_vision_session_out_of_range_components(client):
    response = client.post("/api/analysis/vision/session", json={
        "payloads": [{"body": 140, "brain": 50, "bat": -20, "ball": 50}],
    })
    assert response.status_code == 200
    body = response.json()
    assert body["analyses"][0]["four_b"]["scores"]["body"] == 100
    assert body["summary"]["avg_body"] == 100
    assert body["summary"]["avg_bat"] == 0


# =============================================================================
# Composite
# =============================================================================

def test_composite(client):
    scores = {"body": 60, "brain": 80, "bat": 70, "ball": 80}
    sensor = client.post("/api/scores/composite", json={"scores": scores}).json()
    assert sensor["composite"] == 71
    assert sensor["grade"] == "Plus-Plus"

    vision = client.post(
        "/api/scores/composite", json={"scores": scores, "source_fidelity": "vision2d"}
    ).json()
    assert vision["composite"] == 60
    assert vision["effective"]["brain"] == 55


def test_composite_out_of_range(client):
    response = client.post(
        "/api/scores/composite", json={"scores": {"body": 120, "brain": 50, "bat": 50, "ball": 50}}
    )
    assert response.status_code == 422


# =============================================================================
# Capture sessions
# =============================================================================

def test_capture_session_flow(client):
    created = client.post("/api/sessions", json={"age_group": "HS", "player_name": "Jordan"})
    assert created.status_code == 201
    session_id = created.json()["id"]
    assert created.json()["summary"] is None

    first = client.post(f"/api/sessions/{session_id}/swings", json=EXAMPLE)
    assert first.status_code == 200
    assert first.json()["summary"]["valid_swings"] == 1

    client.post(f"/api/sessions/{session_id}/swings", json={"bat_speed_mph": 80})

    loaded = client.get(f"/api/sessions/{session_id}").json()
    assert loaded["player_name"] == "Jordan"
    assert len(loaded["swings"]) == 2
    assert loaded["summary"]["total_swings"] == 2
    assert loaded["summary"]["max_bat_speed"] == 80


def test_capture_session_default_age_group(client):
    assert client.post("/api/sessions", json={}).json()["age_group"] == "12U"


def test_unknown_capture_session(client):
    assert client.get("/api/sessions/nope").status_code == 404
    assert client.post("/api/sessions/nope/swings", json=EXAMPLE).status_code == 404
