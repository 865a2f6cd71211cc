"""Couriers, packages and delivery tracking."""