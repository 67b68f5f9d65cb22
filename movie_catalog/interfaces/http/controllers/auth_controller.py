# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from movie_catalog.application.use_cases.users.login_user import LoginUserUseCase
from movie_catalog.application.use_cases.users.register_user import RegisterUserUseCase
from movie_catalog.interfaces.http.dto.auth import (
    SigninRequestDTO,
    SigninSuccessDTO,
    SignupRequestDTO,
    SignupSuccessDTO,
)
from movie_catalog.interfaces.http.payload import request_payload
from movie_catalog.shared.errors import AppError, InfrastructureError
from movie_catalog.shared.errors.validation import raise_validation_error
from movie_catalog.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def signup(self) -> tuple[Response, int]:
        try:
            dto = SignupRequestDTO.model_validate(request_payload(allow_form=True))
        except ValidationError as exc:
            raise_validation_error(
                exc, message="Please include both username and password to signup."
            )

        try:
            user = self._register_use_case.execute(dto.username, dto.password, dto.name)
        except AppError as exc:
            logger.info(f"auth.signup: rejected ({exc.code}) username={dto.username}")
            raise
        except Exception as exc:
            logger.exception(f"auth.signup: err username={dto.username}")
            raise InfrastructureError(code="signup_failed") from exc

        logger.info(f"auth.signup: ok user_id={user.id}")
        return jsonify(SignupSuccessDTO().model_dump()), HTTPStatus.CREATED

    def signin(self) -> tuple[Response, int]:
        payload = request_payload(allow_form=True)
        dto = SigninRequestDTO.model_validate(payload if isinstance(payload, dict) else {})

        try:
            token = self._login_use_case.execute(dto.username, dto.password)
        except AppError as exc:
            logger.info(f"auth.signin: rejected ({exc.code}) username={dto.username}")
            raise
        except Exception as exc:
            logger.exception(f"auth.signin: err username={dto.username}")
            raise InfrastructureError(code="signin_failed") from exc

        logger.info(f"auth.signin: ok username={dto.username}")
        return jsonify(SigninSuccessDTO(token=token).model_dump()), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/signin", view_func=self.signin, methods=["POST"])
        return bp
