import os
import subprocess


THIS_DIR = os.path.dirname(__file__)
SUPPORT_DIR = os.path.dirname(os.path.abspath(THIS_DIR))


def cog_command(*filenames, check=False):
    if check:
        return ["cog", "--check", "-I", SUPPORT_DIR, *filenames]
    return ["cog", "-e", "-U", "-r", "-I", SUPPORT_DIR, *filenames]


def run_cog(*filenames, check=False):
    subprocess.check_call(cog_command(*filenames, check=check))
