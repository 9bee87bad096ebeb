"""Keyboard key codes, names, virtual-key codes and key actions."""