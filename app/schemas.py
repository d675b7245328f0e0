"""Schemas for API responses."""

from __future__ import annotations

from marshmallow import Schema, fields


class StatusSchema(Schema):
    restcountriesapi = fields.Integer(required=True)
    currenciesapi = fields.Integer(required=True)
    version = fields.String(required=True)
    uptime = fields.Integer(required=True)


class CountryInfoSchema(Schema):
    name = fields.String(required=True)
    continents = fields.List(fields.String(), required=True)
    population = fields.Integer(required=True)
    area = fields.Float(required=True)
    languages = fields.Dict(keys=fields.String(), values=fields.String(), required=True)
    borders = fields.List(fields.String(), required=True)
    flag = fields.String(required=True)
    capital = fields.String(required=True)


class ExchangeSchema(Schema):
    country = fields.String(required=True)
    base_currency = fields.String(required=True, data_key="base-currency")
    exchange_rates = fields.Dict(
        keys=fields.String(),
        values=fields.Float(),
        required=True,
        data_key="exchange-rates",
    )


class ErrorSchema(Schema):
    error = fields.String(required=True)
