"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from movie_catalog.application.services import JwtTokenService, WerkzeugPasswordHasher
from movie_catalog.application.use_cases.movies import (
    CreateMovieUseCase,
    DeleteMovieUseCase,
    GetMovieUseCase,
    ListMoviesUseCase,
    UpdateMovieUseCase,
)
from movie_catalog.application.use_cases.users import LoginUserUseCase, RegisterUserUseCase
from movie_catalog.infrastructure.auth import AuthenticationGate
from movie_catalog.infrastructure.db import Database
from movie_catalog.infrastructure.repositories import (
    SqlAlchemyMovieRepository,
    SqlAlchemyUserRepository,
)
from movie_catalog.interfaces.http.controllers import (
    AuthController,
    MiscController,
    MoviesController,
)
from movie_catalog.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database.from_config(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        auth = self.config.auth
        return JwtTokenService(
            secret=self.config.secret_key,
            scheme=auth.token_scheme,
            ttl_seconds=auth.token_ttl_seconds,
            algorithm=auth.algorithm,
        )

    @cached_property
    def authentication_gate(self) -> AuthenticationGate:
        return AuthenticationGate(tokens=self.token_service)

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database.session_factory)

    @cached_property
    def movie_repository(self) -> SqlAlchemyMovieRepository:
        return SqlAlchemyMovieRepository(self.database.session_factory)

    # User use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    # Movie use cases

    @cached_property
    def list_movies_use_case(self) -> ListMoviesUseCase:
        return ListMoviesUseCase(movies=self.movie_repository)

    @cached_property
    def create_movie_use_case(self) -> CreateMovieUseCase:
        return CreateMovieUseCase(movies=self.movie_repository)

    @cached_property
    def get_movie_use_case(self) -> GetMovieUseCase:
        return GetMovieUseCase(movies=self.movie_repository)

    @cached_property
    def update_movie_use_case(self) -> UpdateMovieUseCase:
        return UpdateMovieUseCase(movies=self.movie_repository)

    @cached_property
    def delete_movie_use_case(self) -> DeleteMovieUseCase:
        return DeleteMovieUseCase(movies=self.movie_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def movies_controller(self) -> MoviesController:
        return MoviesController(
            gate=self.authentication_gate,
            list_movies=self.list_movies_use_case,
            create_movie=self.create_movie_use_case,
            get_movie=self.get_movie_use_case,
            update_movie=self.update_movie_use_case,
            delete_movie=self.delete_movie_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database)
