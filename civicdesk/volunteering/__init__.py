"""Departments, volunteers and assignments."""