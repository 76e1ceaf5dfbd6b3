def test_recipes_passes_response_through(client, recipe_client):
    payload = [{"id": 1, "title": "Pancakes", "usedIngredientCount": 2}]
    recipe_client.find_by_ingredients.return_value = payload
    response = client.post("/recipes", json={"ingredients": ["egg", "flour"]})
    assert response.status_code == 200
    assert response.json() == payload
    recipe_client.find_by_ingredients.assert_called_once_with(["egg", "flour"])


def test_recipes_error_returns_500(client, recipe_client):
    recipe_client.find_by_ingredients.side_effect = RuntimeError("Spoonacular API failed[401]")
    response = client.post("/recipes", json={"ingredients": ["egg"]})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch recipes", "details": "Spoonacular API failed[401]"}


def test_recipes_without_ingredients_returns_400(client, recipe_client):
    response = client.post("/recipes", json={})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request"
    recipe_client.find_by_ingredients.assert_not_called()


def test_recipe_details_passes_response_through(client, recipe_client):
    recipe_client.recipe_information.return_value = {"id": 12345, "title": "Omelette"}
    response = client.get("/recipe/12345")
    assert response.status_code == 200
    assert response.json() == {"id": 12345, "title": "Omelette"}
    recipe_client.recipe_information.assert_called_once_with("12345")


def test_recipe_details_error_returns_500(client, recipe_client):
    recipe_client.recipe_information.side_effect = ConnectionError("connection reset")
    response = client.get("/recipe/12345")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch recipe details", "details": "connection reset"}
