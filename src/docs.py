"""Fixed Swagger 2.0 description served at ``/docs``."""
import json

SWAGGER = {
    "swagger": "2.0",
    "info": {
        "title": "Sentiment Analysis API",
        "description": "A simple API to analyze the sentiment of a text",
        "version": "1.0.0",
    },
    "host": "localhost:8080",
    "basePath": "/",
    "paths": {
        "/analyze": {
            "post": {
                "summary": "Analyze the sentiment of a text",
                "description": "Analyze the sentiment of a text",
                "consumes": ["application/json"],
                "produces": ["application/json"],
                "parameters": [
                    {
                        "name": "body",
                        "in": "body",
                        "schema": {"$ref": "#/definitions/SentimentRequest"},
                    }
                ],
                "responses": {
                    "200": {
                        "description": "Success",
                        "schema": {"$ref": "#/definitions/SentimentResponse"},
                    },
                    "400": {"description": "Bad Request"},
                    "405": {"description": "Method Not Allowed"},
                    "500": {"description": "Internal Server Error"},
                },
            }
        },
        "/healthcheck": {
            "get": {
                "summary": "Healthcheck",
                "description": "Healthcheck",
                "produces": ["application/json"],
                "responses": {
                    "200": {"description": "Success"},
                    "405": {"description": "Method Not Allowed"},
                },
            }
        },
    },
    "definitions": {
        "SentimentRequest": {
            "type": "object",
            "properties": {"text": {"type": "string"}},
        },
        "SentimentResponse": {
            "type": "object",
            "properties": {
                "sentiment": {
                    "type": "string",
                    "enum": ["positive", "negative", "neutral"],
                },
                "sentiment_score": {"type": "number"},
            },
        },
    },
}

SWAGGER_BODY = json.dumps(SWAGGER, indent=2).encode("utf-8")
