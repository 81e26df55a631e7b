"""Domain layer: password value, checker results and errors"""
