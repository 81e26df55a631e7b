"""Infrastructure: configuration, logging and hash encoders"""
