from mal.builtin.env_builtin import register, make_root_env

__all__ = ["register", "make_root_env"]
