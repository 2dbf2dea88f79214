"""
GraphQL documents sent by the scenario suite
Field selections avoid Album.userId; ownership is read through `user { id }`
"""

from typing import Any, Dict, Optional

# === USERS ===

GET_USER = """
query GetUser($id: ID!) {
  user(id: $id) {
    id
    name
    username
    email
    phone
    website
  }
}
"""

GET_USER_ID_NAME = """
query GetUser($id: ID!) {
  user(id: $id) {
    id
    name
  }
}
"""

GET_USER_WITH_ALBUMS = """
query GetUserWithAlbums($id: ID!) {
  user(id: $id) {
    id
    name
    albums {
      data {
        id
        title
        user {
          id
          name
        }
      }
    }
  }
}
"""

GET_USERS = """
query GetUsers($options: PageQueryOptions) {
  users(options: $options) {
    data {
      id
      name
      username
      email
    }
    meta {
      totalCount
    }
  }
}
"""

GET_ALL_USERS = """
query GetAllUsers {
  users {
    data {
      id
      name
      username
      email
    }
  }
}
"""

GET_USERS_WITH_ALBUMS = """
query GetUsersWithAlbums {
  users {
    data {
      id
      name
      username
      email
      phone
      website
      albums {
        data {
          id
          title
          user { id }
        }
      }
    }
  }
}
"""

# === ALBUMS ===

GET_ALBUM = """
query GetAlbum($id: ID!) {
  album(id: $id) {
    id
    title
    user {
      id
      name
      username
    }
  }
}
"""

GET_ALBUM_ID_TITLE = """
query GetAlbum($id: ID!) {
  album(id: $id) {
    id
    title
  }
}
"""

GET_ALBUM_WITH_USER = """
query GetAlbumWithUser($id: ID!) {
  album(id: $id) {
    id
    title
    user {
      id
      name
      username
      email
      phone
      website
    }
  }
}
"""

GET_ALBUM_INVALID_FIELD = """
query GetAlbum($id: ID!) {
  album(id: $id) {
    id
    title
    nonExistentField
  }
}
"""

GET_ALBUMS = """
query GetAlbums($options: PageQueryOptions) {
  albums(options: $options) {
    data {
      id
      title
      user {
        id
        name
        username
      }
    }
    meta {
      totalCount
    }
  }
}
"""

GET_ALL_ALBUMS = """
query GetAllAlbums {
  albums {
    data {
      id
      title
      user {
        id
      }
    }
  }
}
"""

GET_USER_ALBUMS = """
query GetUserAlbums($userId: ID!) {
  user(id: $userId) {
    id
    name
    albums {
      data {
        id
        title
      }
    }
  }
}
"""

GET_USER_ALBUMS_PAGINATED = """
query GetUserAlbumsWithPagination($userId: ID!, $options: PageQueryOptions) {
  user(id: $userId) {
    id
    albums(options: $options) {
      data {
        id
        title
      }
      meta {
        totalCount
      }
    }
  }
}
"""

GET_COMPLEX_ALBUM = """
query GetComplexAlbumData($id: ID!) {
  album(id: $id) {
    id
    title
    user {
      id
      name
      username
      albums {
        data {
          id
          title
        }
      }
    }
  }
}
"""

GET_MULTIPLE_ALBUMS = """
query GetMultipleAlbums {
  album1: album(id: "1") {
    id
    title
  }
  album2: album(id: "2") {
    id
    title
  }
  album3: album(id: "999999") {
    id
    title
  }
}
"""

GET_USERS_AND_ALBUMS_PAGES = """
query GetComplexData {
  users(options: { paginate: { page: 1, limit: 3 } }) {
    data {
      id
      name
      username
      email
      albums { data { id title user { id } } }
    }
    meta { totalCount }
  }
  albums(options: { paginate: { page: 1, limit: 5 } }) {
    data { id title user { id name username } }
    meta { totalCount }
  }
}
"""

# === ERROR PATHS ===

GET_USER_WITH_UNUSED_REQUIRED_VARIABLE = """
query GetUser($id: ID!, $required: String!) {
  user(id: $id) {
    id
    name
  }
}
"""

INVALID_ROOT_FIELD = """
query {
  invalidField
}
"""

# === MUTATIONS ===

CREATE_USER = """
mutation CreateUser($input: CreateUserInput!) {
  createUser(input: $input) {
    id
    name
    username
    email
    phone
    website
  }
}
"""

UPDATE_USER = """
mutation UpdateUser($id: ID!, $input: UpdateUserInput!) {
  updateUser(id: $id, input: $input) {
    id
    name
    username
    email
    phone
    website
  }
}
"""

DELETE_USER = """
mutation DeleteUser($id: ID!) {
  deleteUser(id: $id)
}
"""

CREATE_ALBUM = """
mutation CreateAlbum($input: CreateAlbumInput!) {
  createAlbum(input: $input) {
    id
    title
    user { id name }
  }
}
"""

UPDATE_ALBUM = """
mutation UpdateAlbum($id: ID!, $input: UpdateAlbumInput!) {
  updateAlbum(id: $id, input: $input) {
    id
    title
    user { id }
  }
}
"""

DELETE_ALBUM = """
mutation DeleteAlbum($id: ID!) {
  deleteAlbum(id: $id)
}
"""


def paginate(page: Optional[int] = None, limit: Optional[int] = None) -> Dict[str, Any]:
    """Build PageQueryOptions: {"paginate": {"page": ..., "limit": ...}}"""
    options: Dict[str, Any] = {}
    if page is not None:
        options["page"] = page
    if limit is not None:
        options["limit"] = limit
    return {"paginate": options}


def inline_user_query(user_id: str) -> str:
    """Variable-free user read, used for parallel fan-out"""
    return f'query {{ user(id: "{user_id}") {{ id name }} }}'
