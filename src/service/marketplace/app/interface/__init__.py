"""Marketplace application ports"""
