"""Test package for the documentation portal content API"""
